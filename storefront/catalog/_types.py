"""
Catalog types — Product and catalog errors.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront._types import ProductId

DEFAULT_CATEGORY = "عمومی"
DEFAULT_DESCRIPTION = "بدون توضیح"
DEFAULT_PRICE = "0 افغانی"
ALL_CATEGORIES = "all"

# ═══════════════════════════════════════════════════════════════════════════════
# Product
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Product:
    """
    One sellable item.

    Immutable: when stock changes the catalog swaps in a new instance
    (dataclasses.replace), so snapshots taken earlier stay intact.
    """

    id: ProductId
    name: str
    code: str
    description: str
    full_description: str
    price: str  # "1,250 افغانی", parsed on demand
    stock: int
    category: str
    images: tuple[str, ...]

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on the searchable fields."""
        return any(
            term in field.lower()
            for field in (self.name, self.code, self.description, self.full_description)
            if field
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SourceUnavailable:
    """Catalog fetch failed, timed out or returned an unsuccessful payload."""

    message: str
    status: int | None = None
    timed_out: bool = False

    def __str__(self) -> str:
        if self.status is not None:
            return f"[{self.status}] {self.message}"
        return self.message


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "DEFAULT_CATEGORY",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_PRICE",
    "ALL_CATEGORIES",
    "Product",
    "SourceUnavailable",
)
