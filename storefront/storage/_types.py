"""
Storage types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

# ═══════════════════════════════════════════════════════════════════════════════
# Well-known keys
# ═══════════════════════════════════════════════════════════════════════════════

PRODUCTS_KEY = "aymShopProducts"
CART_KEY = "aymShopCart"
ORIGINAL_CART_KEY = "aymShopOriginalCart"

# ═══════════════════════════════════════════════════════════════════════════════
# Storage Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class Storage(Protocol):
    """
    Durable key-value storage protocol.

    Values are serialized strings; callers own the encoding.
    Backends raise StorageError on failure — the catalog and cart
    catch it, log it and keep their in-memory state.

    Example:
        class RedisStorage:
            def __init__(self, client: Redis, namespace: str = "shop"):
                self.client = client
                self.namespace = namespace

            @property
            def name(self) -> str:
                return "redis"

            def get(self, key: str) -> str | None:
                try:
                    data = self.client.get(f"{self.namespace}:{key}")
                except RedisError as e:
                    raise StorageError(key, str(e)) from e
                return data.decode() if data else None

            ...
    """

    @property
    def name(self) -> str:
        """Backend name for debugging."""
        ...

    def get(self, key: str) -> str | None:
        """Get value. Returns None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Set value, overwriting any previous one."""
        ...

    def delete(self, key: str) -> bool:
        """Delete key. Returns True if existed."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(eq=False)
class StorageError(Exception):
    """Storage read/write failure."""

    key: str
    message: str

    def __str__(self) -> str:
        return f"storage[{self.key}]: {self.message}"


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "PRODUCTS_KEY",
    "CART_KEY",
    "ORIGINAL_CART_KEY",
    "Storage",
    "StorageError",
)
