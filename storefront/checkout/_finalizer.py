"""
CheckoutFinalizer — validate the whole cart, then commit it in one go.

    IDLE → VALIDATING → COMMITTED
                      ↘ REJECTED

Validation is exhaustive: every offending line is reported, and nothing
is touched until every line has passed. Commit cannot fail halfway, so
there is nothing to compensate.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import datetime

from kungfu import Ok, Error, Result

from storefront.catalog import CatalogStore, Product
from storefront.cart import CartLedger, CartLine
from storefront.checkout._types import (
    CustomerInfo,
    OrderLine,
    OrderRecord,
    CheckoutState,
    CheckoutError,
    InsufficientStock,
    EmptyCart,
)
from storefront.checkout._serial import generate_serial

logger = logging.getLogger(__name__)


class CheckoutFinalizer:
    """
    Example:
        finalizer = CheckoutFinalizer(catalog, ledger)
        match finalizer.finalize(CustomerInfo.of("Ali", "0700", "Kabul")):
            case Ok(order): print(order.serial)
            case Error(InsufficientStock(names)): print(names)
            case Error(EmptyCart()): ...
    """

    def __init__(
        self,
        catalog: CatalogStore,
        ledger: CartLedger,
        *,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
    ) -> None:
        self.catalog = catalog
        self.ledger = ledger
        self.clock = clock
        self.rng = rng or random.Random()
        self.state = CheckoutState.IDLE
        self.last_order: OrderRecord | None = None
        self.customer = CustomerInfo()

    def finalize(self, customer: CustomerInfo) -> Result[OrderRecord, CheckoutError]:
        self.customer = customer
        lines = self.ledger.lines
        if not lines:
            self.state = CheckoutState.REJECTED
            return Error(EmptyCart())

        self.state = CheckoutState.VALIDATING
        match self.validate(lines):
            case Error(e):
                self.state = CheckoutState.REJECTED
                logger.info("checkout rejected: %s", e)
                return Error(e)
            case Ok(products):
                order = self._commit(lines, products, customer)

        self.state = CheckoutState.COMMITTED
        self.last_order = order
        return Ok(order)

    def validate(self, lines: tuple[CartLine, ...]) -> Result[tuple[Product, ...], InsufficientStock]:
        """
        Check every line against live stock; report all offenders.

        On success the live products come back in line order.
        """
        offending: list[str] = []
        products: list[Product] = []
        for line in lines:
            product = self.catalog.get_by_id(line.product_id)
            if product is None or product.stock < line.quantity:
                offending.append(line.name)
            else:
                products.append(product)
        if offending:
            return Error(InsufficientStock(tuple(offending)))
        return Ok(tuple(products))

    def _commit(
        self,
        lines: tuple[CartLine, ...],
        products: tuple[Product, ...],
        customer: CustomerInfo,
    ) -> OrderRecord:
        for line, product in zip(lines, products, strict=True):
            self.catalog.set_stock(product.id, product.stock - line.quantity)

        self.catalog.persist()
        self.ledger.persist_original()

        now = self.clock()
        order_lines = tuple(
            OrderLine(
                product_id=line.product_id,
                name=line.name,
                quantity=line.quantity,
                unit_price=line.unit_price,
                line_total=line.line_total,
            )
            for line in lines
        )
        return OrderRecord(
            serial=generate_serial(now, self.rng),
            customer=customer,
            lines=order_lines,
            total=sum(l.line_total for l in order_lines),
            created_at=now,
        )


__all__ = ("CheckoutFinalizer",)
