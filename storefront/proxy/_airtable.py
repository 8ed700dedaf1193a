"""
Airtable upstream — one GET for the whole table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from kungfu import LazyCoroResult
from combinators import lift as L

from storefront._config import ProxySettings


@dataclass(frozen=True, slots=True)
class UpstreamError:
    message: str
    status: int | None = None

    def __str__(self) -> str:
        return self.message


def _upstream_error(e: Exception) -> UpstreamError:
    match e:
        case httpx.HTTPStatusError():
            return UpstreamError(f"Airtable error: {e.response.status_code}", e.response.status_code)
        case _:
            return UpstreamError(str(e) or type(e).__name__)


def fetch_records(
    settings: ProxySettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LazyCoroResult[list[dict[str, Any]], UpstreamError]:
    """Raw records of the configured table (may be empty)."""

    async def do_fetch() -> list[dict[str, Any]]:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get(
                settings.records_url,
                headers={
                    "Authorization": f"Bearer {settings.api_key}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        response.raise_for_status()
        return response.json().get("records") or []

    return L.catching_async(do_fetch, on_error=_upstream_error)


__all__ = ("UpstreamError", "fetch_records")
