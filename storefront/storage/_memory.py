"""
In-memory storage — the default backend and the one tests use.
"""

from __future__ import annotations


class MemoryStorage:
    """
    Dict-backed storage, scoped to the process.

    Example:
        storage = MemoryStorage()
        storage.set("aymShopCart", "[]")
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    @property
    def name(self) -> str:
        return "memory"

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        if key in self._data:
            del self._data[key]
            return True
        return False


__all__ = ("MemoryStorage",)
