from __future__ import annotations

import pytest

from storefront.catalog import (
    Product,
    CatalogStore,
    StaticCatalogSource,
    DEFAULT_CATEGORY,
    placeholder_image,
)
from storefront.storage import MemoryStorage, StorageError
from storefront.cart import CartLedger


def make_product(
    product_id: str,
    *,
    name: str | None = None,
    price: str = "100 افغانی",
    stock: int = 10,
    category: str = DEFAULT_CATEGORY,
    code: str | None = None,
    description: str = "بدون توضیح",
) -> Product:
    return Product(
        id=product_id,
        name=name or f"product {product_id}",
        code=code or f"CODE-{product_id[:4]}",
        description=description,
        full_description=description,
        price=price,
        stock=stock,
        category=category,
        images=(placeholder_image(category),),
    )


class FailingStorage:
    """Every read and write fails."""

    name = "failing"

    def get(self, key: str) -> str | None:
        raise StorageError(key, "disk on fire")

    def set(self, key: str, value: str) -> None:
        raise StorageError(key, "disk on fire")

    def delete(self, key: str) -> bool:
        raise StorageError(key, "disk on fire")


async def loaded_catalog(products: list[Product], storage=None) -> CatalogStore:
    catalog = CatalogStore(StaticCatalogSource(products), storage or MemoryStorage())
    result = await catalog.load()
    assert result
    return catalog


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def products() -> list[Product]:
    return [
        make_product("p1", name="Shampoo", price="1,250 افغانی", stock=10, category="مراقبت مو"),
        make_product("p2", name="Soap", price="300 افغانی", stock=1, category="بهداشتی"),
        make_product("p3", name="Cream", price="900", stock=0, category="مراقبت پوست"),
    ]


@pytest.fixture
async def catalog(products, storage) -> CatalogStore:
    return await loaded_catalog(products, storage)


@pytest.fixture
def ledger(catalog, storage) -> CartLedger:
    return CartLedger(catalog, storage)
