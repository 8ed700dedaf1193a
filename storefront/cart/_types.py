"""
Cart types — CartLine and its stored shape.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from storefront._types import ProductId
from storefront.catalog import Product
from storefront.pricing import parse_price

# ═══════════════════════════════════════════════════════════════════════════════
# CartLine
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartLine:
    """
    One product + quantity in the cart.

    name/price/images/category are copied when the line is created and
    only used for display; stock checks always go back to the catalog.
    """

    product_id: ProductId
    quantity: int
    name: str
    price: str
    images: tuple[str, ...] = ()
    category: str = ""

    @classmethod
    def of(cls, product: Product, quantity: int) -> CartLine:
        return cls(
            product_id=product.id,
            quantity=quantity,
            name=product.name,
            price=product.price,
            images=product.images,
            category=product.category,
        )

    @property
    def unit_price(self) -> int:
        return parse_price(self.price)

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity


# ═══════════════════════════════════════════════════════════════════════════════
# Stored shape
# ═══════════════════════════════════════════════════════════════════════════════


class CartLinePayload(BaseModel):
    """One stored cart entry: {id, name, price, quantity, images, category}."""

    id: str
    name: str = ""
    price: str = ""
    quantity: int
    images: list[str] = Field(default_factory=list)
    category: str = ""

    @classmethod
    def from_domain(cls, line: CartLine) -> CartLinePayload:
        return cls(
            id=line.product_id,
            name=line.name,
            price=line.price,
            quantity=line.quantity,
            images=list(line.images),
            category=line.category,
        )

    def to_domain(self) -> CartLine:
        return CartLine(
            product_id=self.id,
            quantity=self.quantity,
            name=self.name,
            price=self.price,
            images=tuple(self.images),
            category=self.category,
        )


__all__ = ("CartLine", "CartLinePayload")
