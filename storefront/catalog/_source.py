"""
Catalog sources — where the product list comes from.

HttpCatalogSource talks to the proxy (GET /api/products);
StaticCatalogSource serves a fixed list (seeds, tests, offline demos).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

import httpx
from pydantic import ValidationError
from kungfu import LazyCoroResult, Ok, Error, Result
from combinators import lift as L

from storefront._types import Lazy
from storefront.catalog._types import Product, SourceUnavailable
from storefront.catalog._payload import CatalogPayload

PRODUCTS_PATH = "/api/products"

# ═══════════════════════════════════════════════════════════════════════════════
# CatalogSource Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class CatalogSource(Protocol):
    """
    Anything that can produce the session's product list.

    fetch() is lazy: nothing happens until the result is awaited.
    """

    def fetch(self) -> Lazy[tuple[Product, ...], SourceUnavailable]:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP
# ═══════════════════════════════════════════════════════════════════════════════


def _unavailable(e: Exception) -> SourceUnavailable:
    match e:
        case httpx.HTTPStatusError():
            return SourceUnavailable(f"HTTP error! status: {e.response.status_code}", e.response.status_code)
        case ValidationError():
            return SourceUnavailable("Malformed catalog payload")
        case _:
            return SourceUnavailable(str(e) or type(e).__name__)


class HttpCatalogSource:
    """
    Catalog over the proxy endpoint.

    Non-2xx, transport errors and malformed bodies become SourceUnavailable,
    and so does a well-formed body with success=false.

    Example:
        source = HttpCatalogSource("http://localhost:8000")
        match await source.fetch():
            case Ok(products): ...
            case Error(e): print(e.message)
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._transport = transport

    async def _get(self) -> CatalogPayload:
        if self._client is not None:
            response = await self._client.get(f"{self.base_url}{PRODUCTS_PATH}")
        else:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(f"{self.base_url}{PRODUCTS_PATH}")
        response.raise_for_status()
        return CatalogPayload.model_validate(response.json())

    def fetch(self) -> Lazy[tuple[Product, ...], SourceUnavailable]:
        def check(payload: CatalogPayload) -> Result[tuple[Product, ...], SourceUnavailable]:
            if not payload.success:
                return Error(SourceUnavailable(payload.error or "Failed to fetch products"))
            return Ok(tuple(payload.to_domain()))

        async def run() -> Result[tuple[Product, ...], SourceUnavailable]:
            match await L.catching_async(self._get, on_error=_unavailable):
                case Ok(payload):
                    return check(payload)
                case Error(e):
                    return Error(e)

        return LazyCoroResult(run)


# ═══════════════════════════════════════════════════════════════════════════════
# Static
# ═══════════════════════════════════════════════════════════════════════════════


class StaticCatalogSource:
    """Fixed product list. Set `failure` to simulate an outage."""

    def __init__(self, products: Iterable[Product] = (), *, failure: SourceUnavailable | None = None) -> None:
        self.products = tuple(products)
        self.failure = failure
        self.calls = 0

    def fetch(self) -> Lazy[tuple[Product, ...], SourceUnavailable]:
        async def run() -> Result[tuple[Product, ...], SourceUnavailable]:
            self.calls += 1
            if self.failure is not None:
                return Error(self.failure)
            return Ok(self.products)

        return LazyCoroResult(run)


__all__ = (
    "PRODUCTS_PATH",
    "CatalogSource",
    "HttpCatalogSource",
    "StaticCatalogSource",
)
