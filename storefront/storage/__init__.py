"""
Storage — durable key-value store for the catalog and cart snapshots.

    from storefront import storage as St

    storage = St.MemoryStorage()
    storage = St.SqlStorage.from_url("sqlite:///shop.db")
"""

from __future__ import annotations

from storefront.storage._types import (
    PRODUCTS_KEY,
    CART_KEY,
    ORIGINAL_CART_KEY,
    Storage,
    StorageError,
)
from storefront.storage._memory import MemoryStorage
from storefront.storage._sqlalchemy import SqlStorage

__all__ = (
    "PRODUCTS_KEY",
    "CART_KEY",
    "ORIGINAL_CART_KEY",
    "Storage",
    "StorageError",
    "MemoryStorage",
    "SqlStorage",
)
