"""
Wire payloads — the JSON shape shared by the proxy, the HTTP client
and the storage snapshot.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.catalog._types import (
    Product,
    DEFAULT_CATEGORY,
    DEFAULT_DESCRIPTION,
    DEFAULT_PRICE,
)
from storefront.catalog._mapping import parse_stock
from storefront.catalog._placeholder import placeholder_image


class ProductPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    code: str = ""
    description: str = DEFAULT_DESCRIPTION
    full_description: str = Field(DEFAULT_DESCRIPTION, alias="fullDescription")
    price: str = DEFAULT_PRICE
    stock: int = 0
    category: str = DEFAULT_CATEGORY
    images: list[str] = Field(default_factory=list)

    @field_validator("stock", mode="before")
    @classmethod
    def _coerce_stock(cls, v: Any) -> int:
        return parse_stock(v)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, v: Any) -> str:
        return str(v) if v not in (None, "") else DEFAULT_PRICE

    @classmethod
    def from_domain(cls, product: Product) -> ProductPayload:
        return cls(
            id=product.id,
            name=product.name,
            code=product.code,
            description=product.description,
            full_description=product.full_description,
            price=product.price,
            stock=product.stock,
            category=product.category,
            images=list(product.images),
        )

    def to_domain(self) -> Product:
        category = self.category or DEFAULT_CATEGORY
        return Product(
            id=self.id,
            name=self.name,
            code=self.code or f"CODE-{self.id[:4]}",
            description=self.description,
            full_description=self.full_description,
            price=self.price,
            stock=self.stock,
            category=category,
            images=tuple(dict.fromkeys(self.images)) or (placeholder_image(category),),
        )


class CatalogPayload(BaseModel):
    """Response body of GET /api/products."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    products: list[ProductPayload] = Field(default_factory=list)
    count: int = 0
    error: str | None = None
    message: str | None = None
    last_updated: str | None = Field(None, alias="lastUpdated")

    @classmethod
    def from_domain(
        cls,
        products: list[Product],
        *,
        last_updated: str | None = None,
        message: str | None = None,
    ) -> CatalogPayload:
        return cls(
            success=True,
            products=[ProductPayload.from_domain(p) for p in products],
            count=len(products),
            last_updated=last_updated,
            message=message,
        )

    def to_domain(self) -> list[Product]:
        return [p.to_domain() for p in self.products]


__all__ = ("ProductPayload", "CatalogPayload")
