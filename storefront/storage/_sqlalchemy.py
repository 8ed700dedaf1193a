"""
SQLAlchemy integration — durable key-value storage on any SQL database.

Usage:
    storage = SqlStorage.from_url("sqlite:///shop.db")
    storefront = Storefront.create(source, storage)

The table is created on first use. One row per key; values are the
serialized strings handed over by the catalog and the cart.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from storefront.storage._types import StorageError


# ═══════════════════════════════════════════════════════════════════════════════
# Table
# ═══════════════════════════════════════════════════════════════════════════════

class Base(DeclarativeBase):
    pass


class KeyValueRow(Base):
    """One stored entry."""

    __tablename__ = "storefront_kv"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


# ═══════════════════════════════════════════════════════════════════════════════
# SqlStorage
# ═══════════════════════════════════════════════════════════════════════════════

class SqlStorage:
    """
    Storage backed by a SQLAlchemy engine.

    Every SQLAlchemyError is re-raised as StorageError so callers
    only deal with one failure type.

    Example:
        engine = create_engine("sqlite:///shop.db")
        storage = SqlStorage(engine)
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session: sessionmaker[Session] = sessionmaker(engine, expire_on_commit=False)
        Base.metadata.create_all(engine)

    @classmethod
    def from_url(cls, url: str = "sqlite:///:memory:") -> SqlStorage:
        return cls(create_engine(url, echo=False))

    @property
    def name(self) -> str:
        return f"sql:{self._engine.dialect.name}"

    def get(self, key: str) -> str | None:
        try:
            with self._session() as session:
                row = session.execute(
                    select(KeyValueRow).where(KeyValueRow.key == key)
                ).scalar_one_or_none()
                return row.value if row else None
        except SQLAlchemyError as e:
            raise StorageError(key, str(e)) from e

    def set(self, key: str, value: str) -> None:
        try:
            with self._session.begin() as session:
                row = session.get(KeyValueRow, key)
                now = datetime.now(timezone.utc).replace(tzinfo=None)
                if row is None:
                    session.add(KeyValueRow(key=key, value=value, updated_at=now))
                else:
                    row.value = value
                    row.updated_at = now
        except SQLAlchemyError as e:
            raise StorageError(key, str(e)) from e

    def delete(self, key: str) -> bool:
        try:
            with self._session.begin() as session:
                row = session.get(KeyValueRow, key)
                if row is None:
                    return False
                session.delete(row)
                return True
        except SQLAlchemyError as e:
            raise StorageError(key, str(e)) from e

    def dispose(self) -> None:
        self._engine.dispose()


__all__ = ("KeyValueRow", "SqlStorage")
