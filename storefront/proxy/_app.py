"""
Catalog proxy — GET /api/products over the Airtable table.

Keeps the API key server-side and hands the client already-mapped
products in the CatalogPayload shape.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import fastapi
import httpx
from fastapi.responses import JSONResponse, Response
from kungfu import Ok, Error

from storefront._config import ProxySettings
from storefront.catalog import CatalogPayload, PRODUCTS_PATH, map_records
from storefront.proxy._airtable import fetch_records

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}
CACHE_HEADERS = {"Cache-Control": "s-maxage=60, stale-while-revalidate"}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _json(body: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(body, status_code=status_code, headers={**CORS_HEADERS, **CACHE_HEADERS})


def create_app(
    settings: ProxySettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> fastapi.FastAPI:
    """
    Build the proxy app.

    Without explicit settings the environment is read on every request,
    so credentials can be rotated without a restart.
    """
    app = fastapi.FastAPI(title="storefront catalog proxy")

    @app.options(PRODUCTS_PATH)
    async def products_preflight() -> Response:
        return Response(status_code=200, headers=CORS_HEADERS)

    @app.get(PRODUCTS_PATH)
    async def products() -> JSONResponse:
        current = settings or ProxySettings.from_env()
        if not current.configured:
            logger.error("missing AIRTABLE_API_KEY / AIRTABLE_BASE_ID")
            return _json({"success": False, "error": "Server configuration error"}, 500)

        match await fetch_records(current, transport=transport):
            case Error(e):
                logger.error("airtable fetch failed: %s", e)
                return _json({"success": False, "error": e.message, "timestamp": _now_iso()}, 500)
            case Ok([]):
                return _json({"success": True, "products": [], "count": 0, "message": "No products found"})
            case Ok(records):
                payload = CatalogPayload.from_domain(map_records(records), last_updated=_now_iso())
                return _json(payload.model_dump(mode="json", by_alias=True, exclude_none=True))

    return app


__all__ = ("CORS_HEADERS", "CACHE_HEADERS", "create_app")
