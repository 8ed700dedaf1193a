"""
Catalog — products, ingestion and the session's catalog store.

    from storefront import catalog as Cat

    source = Cat.HttpCatalogSource("http://localhost:8000")
    store = Cat.CatalogStore(source, storage)
    await store.load()

    store.get_by_id("rec123")
    Cat.map_record({"id": "rec123", "fields": {"نام": "صابون"}})
"""

from __future__ import annotations

from storefront.catalog._types import (
    DEFAULT_CATEGORY,
    DEFAULT_DESCRIPTION,
    DEFAULT_PRICE,
    ALL_CATEGORIES,
    Product,
    SourceUnavailable,
)
from storefront.catalog._placeholder import (
    DEFAULT_GLYPH,
    CATEGORY_GLYPHS,
    placeholder_for,
    placeholder_image,
)
from storefront.catalog._mapping import (
    parse_stock,
    collect_images,
    map_record,
    map_records,
)
from storefront.catalog._payload import ProductPayload, CatalogPayload
from storefront.catalog._source import (
    PRODUCTS_PATH,
    CatalogSource,
    HttpCatalogSource,
    StaticCatalogSource,
)
from storefront.catalog._store import FETCH_TIMEOUT, TIMEOUT_MESSAGE, CatalogStore

__all__ = (
    # Types
    "DEFAULT_CATEGORY",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_PRICE",
    "ALL_CATEGORIES",
    "Product",
    "SourceUnavailable",
    # Placeholders
    "DEFAULT_GLYPH",
    "CATEGORY_GLYPHS",
    "placeholder_for",
    "placeholder_image",
    # Mapping
    "parse_stock",
    "collect_images",
    "map_record",
    "map_records",
    # Payloads
    "ProductPayload",
    "CatalogPayload",
    # Sources
    "PRODUCTS_PATH",
    "CatalogSource",
    "HttpCatalogSource",
    "StaticCatalogSource",
    # Store
    "FETCH_TIMEOUT",
    "TIMEOUT_MESSAGE",
    "CatalogStore",
)
