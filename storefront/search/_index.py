"""
SearchIndex — filtered, paginated projection of the catalog.

Owns only query, category, page and the matching ids. Products are
resolved through the CatalogStore on every read, so stock changes show
up immediately.
"""

from __future__ import annotations

import math

from storefront._types import ProductId
from storefront.catalog import CatalogStore, Product, ALL_CATEGORIES

PAGE_SIZE = 20

# The storefront's category bar labels the sentinel in Persian too.
ALL_CATEGORY_ALIASES = frozenset({ALL_CATEGORIES, "همه"})


class SearchIndex:
    """
    Example:
        index = SearchIndex(catalog)
        index.search("شامپو", "مراقبت مو")
        index.paginate()        # first 20
        index.next_page()
        index.total_pages()
    """

    def __init__(self, catalog: CatalogStore, *, page_size: int = PAGE_SIZE) -> None:
        self.catalog = catalog
        self.page_size = page_size
        self.query = ""
        self.category = ALL_CATEGORIES
        self.page = 1
        self._results: list[ProductId] | None = None

    @property
    def results(self) -> list[Product]:
        """Full filtered result of the last search (whole catalog before any)."""
        if self._results is None:
            return list(self.catalog.products)
        resolved = (self.catalog.get_by_id(pid) for pid in self._results)
        return [p for p in resolved if p is not None]

    def search(self, query: str = "", category: str | None = None) -> list[Product]:
        """
        Filter by category, then by query. Resets to page 1.

        `category=None` keeps the active category.
        """
        if category is not None:
            self.category = category
        self.query = query
        self.page = 1

        products = list(self.catalog.products)
        if self.category not in ALL_CATEGORY_ALIASES:
            products = [p for p in products if p.category == self.category]
        if query and query.strip():
            term = query.lower()
            products = [p for p in products if p.matches(term)]

        self._results = [p.id for p in products]
        return list(products)

    def reset(self) -> list[Product]:
        """Clear query and category; back to the whole catalog."""
        return self.search("", ALL_CATEGORIES)

    # ───────────────────────────────────────────────────────────────────────────
    # Pagination
    # ───────────────────────────────────────────────────────────────────────────

    def paginate(self) -> list[Product]:
        """Current page slice; empty beyond the last page."""
        start = (self.page - 1) * self.page_size
        return self.results[start:start + self.page_size]

    def total_pages(self) -> int:
        return math.ceil(len(self.results) / self.page_size)

    def go_to(self, page: int) -> list[Product]:
        """Jump to a page, clamped to the valid range."""
        self.page = min(max(page, 1), max(self.total_pages(), 1))
        return self.paginate()

    def next_page(self) -> list[Product]:
        return self.go_to(self.page + 1)

    def previous_page(self) -> list[Product]:
        return self.go_to(self.page - 1)


__all__ = ("PAGE_SIZE", "ALL_CATEGORY_ALIASES", "SearchIndex")
