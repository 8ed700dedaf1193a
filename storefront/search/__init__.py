"""
Search — query/category filter and pagination over the catalog.

    from storefront import search as Se

    index = Se.SearchIndex(catalog)
    index.search("cream", "all")
    index.paginate()
"""

from __future__ import annotations

from storefront.search._index import PAGE_SIZE, ALL_CATEGORY_ALIASES, SearchIndex

__all__ = ("PAGE_SIZE", "ALL_CATEGORY_ALIASES", "SearchIndex")
