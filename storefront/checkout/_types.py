"""
Checkout types — customer, order snapshot, states and outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol

from kungfu import Result

from storefront._types import ProductId

# ═══════════════════════════════════════════════════════════════════════════════
# Customer
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CustomerInfo:
    """Free-text contact details, trimmed."""

    name: str = ""
    phone: str = ""
    address: str = ""

    @classmethod
    def of(cls, name: str, phone: str, address: str) -> CustomerInfo:
        return cls(name.strip(), phone.strip(), address.strip())


@dataclass(frozen=True, slots=True)
class Cancelled:
    """The customer backed out of the form."""


class CustomerForm(Protocol):
    """
    Collects customer info in one step.

    `defaults` is whatever was entered last time (empty on first use).

    Example:
        def form(defaults: CustomerInfo) -> Result[CustomerInfo, Cancelled]:
            name = ask("name", defaults.name)
            if name is None:
                return Error(Cancelled())
            ...
    """

    def __call__(self, defaults: CustomerInfo) -> Result[CustomerInfo, Cancelled]:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Order
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OrderLine:
    product_id: ProductId
    name: str
    quantity: int
    unit_price: int
    line_total: int


@dataclass(frozen=True, slots=True)
class OrderRecord:
    """Immutable snapshot of a committed checkout."""

    serial: str
    customer: CustomerInfo
    lines: tuple[OrderLine, ...]
    total: int
    created_at: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# State & Errors
# ═══════════════════════════════════════════════════════════════════════════════


class CheckoutState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class InsufficientStock:
    """Every cart line whose product cannot cover the quantity."""

    names: tuple[str, ...]

    def __str__(self) -> str:
        return "insufficient stock: " + ", ".join(self.names)


@dataclass(frozen=True, slots=True)
class EmptyCart:
    def __str__(self) -> str:
        return "cart is empty"


type CheckoutError = InsufficientStock | EmptyCart


__all__ = (
    "CustomerInfo",
    "Cancelled",
    "CustomerForm",
    "OrderLine",
    "OrderRecord",
    "CheckoutState",
    "InsufficientStock",
    "EmptyCart",
    "CheckoutError",
)
