"""
Checkout — validate the cart against stock, commit, emit an OrderRecord.

    from storefront import checkout as Co

    finalizer = Co.CheckoutFinalizer(catalog, ledger)
    match finalizer.finalize(Co.CustomerInfo.of(name, phone, address)):
        case Ok(order): ...
        case Error(Co.InsufficientStock(names)): ...
        case Error(Co.EmptyCart()): ...
"""

from __future__ import annotations

from storefront.checkout._types import (
    CustomerInfo,
    Cancelled,
    CustomerForm,
    OrderLine,
    OrderRecord,
    CheckoutState,
    InsufficientStock,
    EmptyCart,
    CheckoutError,
)
from storefront.checkout._serial import SERIAL_PREFIX, generate_serial
from storefront.checkout._finalizer import CheckoutFinalizer

__all__ = (
    # Types
    "CustomerInfo",
    "Cancelled",
    "CustomerForm",
    "OrderLine",
    "OrderRecord",
    "CheckoutState",
    "InsufficientStock",
    "EmptyCart",
    "CheckoutError",
    # Serial
    "SERIAL_PREFIX",
    "generate_serial",
    # Finalizer
    "CheckoutFinalizer",
)
