"""
Storefront — the context object that wires one session together.

    storefront = Storefront.from_settings(ClientSettings.from_env())
    await storefront.start()

    storefront.search.search("کرم", "all")
    storefront.cart.add_to_cart(product_id)
    match storefront.checkout(form):
        case Ok(order): print(storefront.share_link())
        case Error(e): ...
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import datetime

from kungfu import Ok, Error, Result

from storefront._config import ClientSettings
from storefront.catalog import CatalogStore, CatalogSource, HttpCatalogSource, Product, SourceUnavailable
from storefront.storage import Storage, SqlStorage
from storefront.search import SearchIndex
from storefront.cart import CartLedger
from storefront.checkout import (
    CheckoutFinalizer,
    CustomerForm,
    OrderRecord,
    Cancelled,
    CheckoutError,
)
from storefront import share as Sh

logger = logging.getLogger(__name__)


class Storefront:
    """
    One session: catalog, search view, cart and checkout.

    No globals; build one per entry point and pass it around.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        cart: CartLedger,
        search: SearchIndex,
        finalizer: CheckoutFinalizer,
        *,
        whatsapp_number: str = Sh.WHATSAPP_NUMBER,
    ) -> None:
        self.catalog = catalog
        self.cart = cart
        self.search = search
        self.finalizer = finalizer
        self.whatsapp_number = whatsapp_number

    @classmethod
    def create(
        cls,
        source: CatalogSource,
        storage: Storage,
        *,
        settings: ClientSettings | None = None,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
    ) -> Storefront:
        settings = settings or ClientSettings()
        catalog = CatalogStore(source, storage, timeout_seconds=settings.fetch_timeout)
        cart = CartLedger(catalog, storage)
        return cls(
            catalog,
            cart,
            SearchIndex(catalog),
            CheckoutFinalizer(catalog, cart, clock=clock, rng=rng),
            whatsapp_number=settings.whatsapp_number,
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> Storefront:
        return cls.create(
            HttpCatalogSource(settings.api_url),
            SqlStorage.from_url(settings.db_url),
            settings=settings,
        )

    # ───────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ───────────────────────────────────────────────────────────────────────────

    async def start(self) -> Result[tuple[Product, ...], SourceUnavailable]:
        """Load the catalog and show the first page of everything."""
        result = await self.catalog.load()
        match result:
            case Ok(products):
                self.search.reset()
                logger.info("catalog ready: %d products (cached=%s)", len(products), self.catalog.from_cache)
            case Error(e):
                logger.error("catalog unavailable: %s", e)
        return result

    async def refresh(self) -> Result[tuple[Product, ...], SourceUnavailable]:
        """Manual retry after a failed or timed-out load."""
        return await self.start()

    # ───────────────────────────────────────────────────────────────────────────
    # Checkout
    # ───────────────────────────────────────────────────────────────────────────

    def checkout(self, form: CustomerForm) -> Result[OrderRecord, Cancelled | CheckoutError]:
        """Ask for customer info, then finalize. Cancelling touches nothing."""
        match form(self.finalizer.customer):
            case Error(cancelled):
                return Error(cancelled)
            case Ok(customer):
                return self.finalizer.finalize(customer)

    @property
    def last_order(self) -> OrderRecord | None:
        return self.finalizer.last_order

    def share_link(self) -> str | None:
        """Deep link for the last order; None before any checkout."""
        order = self.last_order
        if order is None:
            return None
        return Sh.share_link(order, number=self.whatsapp_number)

    def print_view(self) -> str | None:
        order = self.last_order
        if order is None:
            return None
        return Sh.render_print_view(order)


__all__ = ("Storefront",)
