import asyncio
import logging

import httpx
import pytest
from kungfu import Ok, Error, LazyCoroResult

from storefront.catalog import (
    CatalogStore,
    HttpCatalogSource,
    StaticCatalogSource,
    SourceUnavailable,
    TIMEOUT_MESSAGE,
)
from storefront.storage import MemoryStorage, PRODUCTS_KEY

from conftest import make_product, FailingStorage


class SlowSource:
    def fetch(self):
        async def run():
            await asyncio.sleep(5)
            return Ok(())

        return LazyCoroResult(run)


# ═══════════════════════════════════════════════════════════════════════════════
# load()
# ═══════════════════════════════════════════════════════════════════════════════


async def test_load_indexes_and_persists(products, storage):
    catalog = CatalogStore(StaticCatalogSource(products), storage)

    match await catalog.load():
        case Ok(loaded):
            assert [p.id for p in loaded] == ["p1", "p2", "p3"]
        case Error(e):
            pytest.fail(str(e))

    assert catalog.get_by_id("p2").name == "Soap"
    assert catalog.get_by_id("missing") is None
    assert storage.get(PRODUCTS_KEY) is not None
    assert catalog.from_cache is False


async def test_empty_catalog_is_valid_and_persisted(storage):
    catalog = CatalogStore(StaticCatalogSource([]), storage)

    assert await catalog.load() == Ok(())
    assert storage.get(PRODUCTS_KEY) == "[]"


async def test_failure_falls_back_to_snapshot(products, storage):
    await CatalogStore(StaticCatalogSource(products), storage).load()

    offline = CatalogStore(StaticCatalogSource(failure=SourceUnavailable("down")), storage)
    result = await offline.load()

    assert result
    assert offline.products == tuple(products)
    assert offline.from_cache is True


async def test_failure_without_snapshot_is_an_error(storage):
    catalog = CatalogStore(StaticCatalogSource(failure=SourceUnavailable("down", 503)), storage)

    assert await catalog.load() == Error(SourceUnavailable("down", 503))
    assert len(catalog) == 0


async def test_unreadable_snapshot_counts_as_absent():
    storage = MemoryStorage({PRODUCTS_KEY: "{not json"})
    catalog = CatalogStore(StaticCatalogSource(failure=SourceUnavailable("down")), storage)

    assert not await catalog.load()


async def test_timeout_skips_fallback(products, storage):
    await CatalogStore(StaticCatalogSource(products), storage).load()
    catalog = CatalogStore(SlowSource(), storage, timeout_seconds=0.01)

    match await catalog.load():
        case Error(e):
            assert e.timed_out
            assert e.message == TIMEOUT_MESSAGE
        case Ok(_):
            pytest.fail("expected timeout")
    assert len(catalog) == 0


async def test_persist_failure_is_logged_not_raised(products, caplog):
    catalog = CatalogStore(StaticCatalogSource(products), FailingStorage())

    with caplog.at_level(logging.WARNING):
        result = await catalog.load()

    assert result
    assert "could not persist catalog" in caplog.text


# ═══════════════════════════════════════════════════════════════════════════════
# Queries & stock
# ═══════════════════════════════════════════════════════════════════════════════


async def test_categories_first_seen_order(storage):
    catalog = CatalogStore(StaticCatalogSource([
        make_product("a", category="عطر"),
        make_product("b", category="کتاب"),
        make_product("c", category="عطر"),
    ]), storage)
    await catalog.load()

    assert catalog.categories() == ["all", "عطر", "کتاب"]


async def test_set_stock_swaps_instance(catalog):
    before = catalog.get_by_id("p1")
    after = catalog.set_stock("p1", 3)

    assert before.stock == 10
    assert after.stock == 3
    assert catalog.get_by_id("p1") is after


async def test_set_stock_rejects_negative(catalog):
    with pytest.raises(ValueError):
        catalog.set_stock("p1", -1)
    with pytest.raises(KeyError):
        catalog.set_stock("missing", 1)


# ═══════════════════════════════════════════════════════════════════════════════
# HttpCatalogSource
# ═══════════════════════════════════════════════════════════════════════════════


def _source(handler) -> HttpCatalogSource:
    return HttpCatalogSource("http://shop.test/", transport=httpx.MockTransport(handler))


async def test_http_source_parses_payload():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/products"
        return httpx.Response(200, json={
            "success": True,
            "count": 1,
            "products": [{"id": "rec1", "name": "Soap", "fullDescription": "long", "price": "50", "stock": 2, "images": ["a.jpg"]}],
        })

    match await _source(handler).fetch():
        case Ok((product,)):
            assert product.name == "Soap"
            assert product.full_description == "long"
            assert product.images == ("a.jpg",)
        case other:
            pytest.fail(repr(other))


async def test_http_source_non_2xx():
    result = await _source(lambda r: httpx.Response(502, text="bad gateway")).fetch()

    assert result == Error(SourceUnavailable("HTTP error! status: 502", 502))


async def test_http_source_unsuccessful_payload():
    result = await _source(lambda r: httpx.Response(200, json={"success": False, "error": "boom"})).fetch()

    assert result == Error(SourceUnavailable("boom"))


async def test_http_source_malformed_payload():
    result = await _source(lambda r: httpx.Response(200, json={"products": "nope"})).fetch()

    assert result == Error(SourceUnavailable("Malformed catalog payload"))


async def test_http_source_transport_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    result = await _source(handler).fetch()

    assert not result
    assert "refused" in result.error.message
