"""
CatalogStore — the session's product list, keyed by id.

Loaded once at startup from a CatalogSource. Successful loads are
snapshotted into storage; a failed fetch falls back to that snapshot.
"""

from __future__ import annotations

import dataclasses
import logging

from pydantic import TypeAdapter, ValidationError
from kungfu import Ok, Error, Result
from combinators import timeout, TimeoutError as CombinatorTimeout

from storefront._types import ProductId
from storefront.catalog._types import Product, SourceUnavailable, ALL_CATEGORIES, DEFAULT_CATEGORY
from storefront.catalog._payload import ProductPayload
from storefront.catalog._source import CatalogSource
from storefront.storage import Storage, StorageError, PRODUCTS_KEY

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 30.0
TIMEOUT_MESSAGE = "بارگیری محصولات بیش از حد طول کشید. لطفاً اتصال اینترنت خود را بررسی کنید"

_snapshot = TypeAdapter(list[ProductPayload])


def _on_timeout(e: SourceUnavailable | CombinatorTimeout) -> SourceUnavailable:
    match e:
        case CombinatorTimeout():
            return SourceUnavailable(TIMEOUT_MESSAGE, timed_out=True)
        case _:
            return e


class CatalogStore:
    """
    Products in source order plus an id index.

    Only the checkout path changes stock, through set_stock().

    Example:
        catalog = CatalogStore(HttpCatalogSource(url), storage)
        match await catalog.load():
            case Ok(products): ...
            case Error(e): show_retry(e.message)
    """

    def __init__(
        self,
        source: CatalogSource,
        storage: Storage,
        *,
        timeout_seconds: float = FETCH_TIMEOUT,
    ) -> None:
        self.source = source
        self.storage = storage
        self.timeout_seconds = timeout_seconds
        self._products: list[Product] = []
        self._index: dict[ProductId, int] = {}
        self.from_cache = False

    # ───────────────────────────────────────────────────────────────────────────
    # Loading
    # ───────────────────────────────────────────────────────────────────────────

    async def load(self) -> Result[tuple[Product, ...], SourceUnavailable]:
        """
        Fetch the catalog, bounded by the watchdog.

        Fetch failure → cached snapshot if there is one.
        Timeout → error straight away; the caller retries by hand.
        """
        fetched = await timeout(self.source.fetch(), seconds=self.timeout_seconds).map_err(_on_timeout)

        match fetched:
            case Ok(products):
                self._replace(products)
                self.from_cache = False
                self.persist()
                return Ok(self.products)
            case Error(e) if e.timed_out:
                logger.warning("catalog fetch timed out after %ss", self.timeout_seconds)
                return Error(e)
            case Error(e):
                logger.warning("catalog fetch failed: %s", e)
                cached = self.restore()
                if cached is None:
                    return Error(e)
                self._replace(cached)
                self.from_cache = True
                return Ok(self.products)

    def restore(self) -> tuple[Product, ...] | None:
        """Last persisted snapshot, or None when absent or unreadable."""
        try:
            raw = self.storage.get(PRODUCTS_KEY)
        except StorageError as e:
            logger.warning("could not read catalog snapshot: %s", e)
            return None
        if raw is None:
            return None
        try:
            return tuple(p.to_domain() for p in _snapshot.validate_json(raw))
        except ValidationError as e:
            logger.warning("discarding unreadable catalog snapshot: %s", e.error_count())
            return None

    def persist(self) -> bool:
        """Write the snapshot. Failures are logged, never raised."""
        payload = [ProductPayload.from_domain(p) for p in self._products]
        try:
            self.storage.set(PRODUCTS_KEY, _snapshot.dump_json(payload, by_alias=True).decode())
        except StorageError as e:
            logger.warning("could not persist catalog: %s", e)
            return False
        return True

    def _replace(self, products: tuple[Product, ...]) -> None:
        self._products = list(products)
        self._index = {p.id: i for i, p in enumerate(self._products)}

    # ───────────────────────────────────────────────────────────────────────────
    # Queries
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    def get_by_id(self, product_id: ProductId) -> Product | None:
        i = self._index.get(product_id)
        return None if i is None else self._products[i]

    def categories(self) -> list[str]:
        """["all", *categories in first-seen order]."""
        seen = dict.fromkeys(p.category or DEFAULT_CATEGORY for p in self._products)
        return [ALL_CATEGORIES, *seen]

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._index

    # ───────────────────────────────────────────────────────────────────────────
    # Mutation
    # ───────────────────────────────────────────────────────────────────────────

    def set_stock(self, product_id: ProductId, stock: int) -> Product:
        """
        Swap in a copy of the product with the new stock.

        Raises KeyError for unknown ids and ValueError for negative stock.
        Does not persist; the caller decides when.
        """
        if stock < 0:
            raise ValueError(f"stock cannot be negative: {product_id}={stock}")
        i = self._index[product_id]
        updated = dataclasses.replace(self._products[i], stock=stock)
        self._products[i] = updated
        return updated


__all__ = ("FETCH_TIMEOUT", "TIMEOUT_MESSAGE", "CatalogStore")
