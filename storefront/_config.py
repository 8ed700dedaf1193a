"""
Settings — read once from the environment into frozen dataclasses.

    settings = ClientSettings.from_env()
    proxy = ProxySettings.from_env()
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TABLE = "Moh7"
DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_DB_URL = "sqlite:///:memory:"
DEFAULT_WHATSAPP_NUMBER = "93789281770"
DEFAULT_FETCH_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class ProxySettings:
    """Airtable credentials for the catalog proxy."""

    api_key: str | None
    base_id: str | None
    table: str = DEFAULT_TABLE

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.base_id)

    @property
    def records_url(self) -> str:
        return f"https://api.airtable.com/v0/{self.base_id}/{self.table}?maxRecords=1000"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ProxySettings:
        env = os.environ if env is None else env
        return cls(
            api_key=env.get("AIRTABLE_API_KEY") or None,
            base_id=env.get("AIRTABLE_BASE_ID") or None,
            table=env.get("AIRTABLE_TABLE") or DEFAULT_TABLE,
        )


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Where the storefront fetches from and persists to."""

    api_url: str = DEFAULT_API_URL
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    db_url: str = DEFAULT_DB_URL
    whatsapp_number: str = DEFAULT_WHATSAPP_NUMBER

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ClientSettings:
        env = os.environ if env is None else env
        return cls(
            api_url=env.get("STOREFRONT_API_URL") or DEFAULT_API_URL,
            fetch_timeout=float(env.get("STOREFRONT_FETCH_TIMEOUT") or DEFAULT_FETCH_TIMEOUT),
            db_url=env.get("STOREFRONT_DB_URL") or DEFAULT_DB_URL,
            whatsapp_number=env.get("STOREFRONT_WHATSAPP_NUMBER") or DEFAULT_WHATSAPP_NUMBER,
        )


__all__ = ("ProxySettings", "ClientSettings")
