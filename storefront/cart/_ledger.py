"""
CartLedger — cart lines with stock enforced on every mutation.

Every successful mutation writes two snapshots: the live cart and the
"original cart" that the share link reads after checkout.
"""

from __future__ import annotations

import dataclasses
import logging

from pydantic import TypeAdapter, ValidationError

from storefront._types import ProductId
from storefront.catalog import CatalogStore
from storefront.storage import Storage, StorageError, CART_KEY, ORIGINAL_CART_KEY
from storefront.cart._types import CartLine, CartLinePayload

logger = logging.getLogger(__name__)

_lines = TypeAdapter(list[CartLinePayload])


def _encode(lines: list[CartLine]) -> str:
    return _lines.dump_json([CartLinePayload.from_domain(l) for l in lines]).decode()


def _decode(raw: str | None) -> list[CartLine]:
    if not raw:
        return []
    return [p.to_domain() for p in _lines.validate_json(raw) if p.quantity > 0]


class CartLedger:
    """
    Example:
        cart = CartLedger(catalog, storage)
        cart.add_to_cart("rec1", 2)        # True
        cart.add_to_cart("rec1", 99)       # False, nothing changed
        cart.update_quantity("rec1", 0)    # removes the line
        cart.total()
    """

    def __init__(self, catalog: CatalogStore, storage: Storage) -> None:
        self.catalog = catalog
        self.storage = storage
        self._lines: list[CartLine] = self._read(CART_KEY)

    # ───────────────────────────────────────────────────────────────────────────
    # Mutations
    # ───────────────────────────────────────────────────────────────────────────

    def add_to_cart(self, product_id: ProductId, qty: int = 1) -> bool:
        """
        Add qty of a product. False (and no change) when the product is
        unknown, qty is not positive, or the cart would exceed stock.
        """
        if qty <= 0:
            return False
        product = self.catalog.get_by_id(product_id)
        if product is None:
            return False

        i = self._find(product_id)
        if i is None:
            if qty > product.stock:
                return False
            self._lines.append(CartLine.of(product, qty))
        else:
            new_qty = self._lines[i].quantity + qty
            if new_qty > product.stock:
                return False
            self._lines[i] = dataclasses.replace(self._lines[i], quantity=new_qty)

        self.persist()
        return True

    def update_quantity(self, product_id: ProductId, new_qty: int) -> bool:
        """
        Set a line's quantity exactly.

        new_qty <= 0 removes the line and always succeeds.
        new_qty above live stock, or no line to set, fails without change.
        """
        if new_qty <= 0:
            i = self._find(product_id)
            if i is not None:
                del self._lines[i]
            self.persist()
            return True

        i = self._find(product_id)
        product = self.catalog.get_by_id(product_id)
        if i is None or product is None or new_qty > product.stock:
            return False

        self._lines[i] = dataclasses.replace(self._lines[i], quantity=new_qty)
        self.persist()
        return True

    def remove_from_cart(self, product_id: ProductId) -> bool:
        i = self._find(product_id)
        if i is None:
            return False
        del self._lines[i]
        self.persist()
        return True

    def clear(self) -> None:
        self._lines = []
        self.persist()

    # ───────────────────────────────────────────────────────────────────────────
    # Queries
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def original_lines(self) -> tuple[CartLine, ...]:
        """Last persisted original-cart snapshot."""
        return tuple(self._read(ORIGINAL_CART_KEY))

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def total(self) -> int:
        return sum(line.line_total for line in self._lines)

    def quantity_of(self, product_id: ProductId) -> int:
        i = self._find(product_id)
        return 0 if i is None else self._lines[i].quantity

    def available(self, product_id: ProductId) -> int:
        """Live stock minus what is already in the cart, never negative."""
        product = self.catalog.get_by_id(product_id)
        if product is None:
            return 0
        return max(product.stock - self.quantity_of(product_id), 0)

    def __len__(self) -> int:
        return len(self._lines)

    # ───────────────────────────────────────────────────────────────────────────
    # Persistence
    # ───────────────────────────────────────────────────────────────────────────

    def persist(self) -> None:
        self._write(CART_KEY)
        self._write(ORIGINAL_CART_KEY)

    def persist_original(self) -> None:
        self._write(ORIGINAL_CART_KEY)

    def _write(self, key: str) -> None:
        try:
            self.storage.set(key, _encode(self._lines))
        except StorageError as e:
            logger.warning("could not persist %s: %s", key, e)

    def _read(self, key: str) -> list[CartLine]:
        try:
            return _decode(self.storage.get(key))
        except StorageError as e:
            logger.warning("could not read %s: %s", key, e)
        except ValidationError:
            logger.warning("discarding unreadable %s", key)
        return []

    def _find(self, product_id: ProductId) -> int | None:
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                return i
        return None


__all__ = ("CartLedger",)
