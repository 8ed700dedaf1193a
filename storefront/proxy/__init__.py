"""
Proxy — the one server-side piece: Airtable → GET /api/products.

    uvicorn storefront.proxy:app

    app = create_app(ProxySettings(api_key, base_id))
"""

from __future__ import annotations

from storefront.proxy._airtable import UpstreamError, fetch_records
from storefront.proxy._app import CORS_HEADERS, CACHE_HEADERS, create_app

app = create_app()

__all__ = (
    "UpstreamError",
    "fetch_records",
    "CORS_HEADERS",
    "CACHE_HEADERS",
    "create_app",
    "app",
)
