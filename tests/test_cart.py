import logging

from storefront.cart import CartLedger
from storefront.storage import MemoryStorage, CART_KEY, ORIGINAL_CART_KEY
from storefront.pricing import parse_price

from conftest import FailingStorage, loaded_catalog


def test_add_within_stock(ledger):
    assert ledger.add_to_cart("p1", 3)
    assert ledger.add_to_cart("p1", 7)

    assert ledger.quantity_of("p1") == 10
    assert ledger.available("p1") == 0


def test_add_beyond_stock_changes_nothing(ledger):
    assert ledger.add_to_cart("p1", 8)
    assert not ledger.add_to_cart("p1", 3)
    assert ledger.quantity_of("p1") == 8

    assert not ledger.add_to_cart("p3")
    assert ledger.quantity_of("p3") == 0


def test_add_rejects_unknown_and_non_positive(ledger):
    assert not ledger.add_to_cart("missing")
    assert not ledger.add_to_cart("p1", 0)
    assert not ledger.add_to_cart("p1", -2)
    assert ledger.is_empty


def test_line_copies_display_fields(ledger):
    ledger.add_to_cart("p1", 2)
    (line,) = ledger.lines

    assert line.name == "Shampoo"
    assert line.price == "1,250 افغانی"
    assert line.category == "مراقبت مو"
    assert line.line_total == 2500


def test_update_quantity(ledger):
    ledger.add_to_cart("p1", 2)

    assert ledger.update_quantity("p1", 5)
    assert ledger.quantity_of("p1") == 5

    assert not ledger.update_quantity("p1", 11)
    assert ledger.quantity_of("p1") == 5


def test_update_to_zero_always_removes(ledger):
    ledger.add_to_cart("p1", 2)

    assert ledger.update_quantity("p1", 0)
    assert ledger.quantity_of("p1") == 0
    assert ledger.update_quantity("p1", 0)
    assert ledger.update_quantity("missing", -1)


def test_update_without_line_is_rejected(ledger, storage):
    assert not ledger.update_quantity("p2", 1)
    assert ledger.is_empty
    assert storage.get(CART_KEY) is None
    assert not ledger.update_quantity("missing", 1)


def test_remove_and_clear(ledger):
    ledger.add_to_cart("p1")
    ledger.add_to_cart("p2")

    assert ledger.remove_from_cart("p2")
    assert not ledger.remove_from_cart("p2")
    assert len(ledger) == 1

    ledger.clear()
    assert ledger.is_empty
    assert ledger.item_count() == 0


def test_totals(ledger, catalog):
    ledger.add_to_cart("p1", 2)
    ledger.add_to_cart("p2", 1)

    assert ledger.item_count() == 3
    assert ledger.total() == 1250 * 2 + 300
    assert ledger.total() == sum(parse_price(l.price) * l.quantity for l in ledger.lines)


def test_every_mutation_writes_both_snapshots(ledger, storage):
    ledger.add_to_cart("p1", 2)
    assert storage.get(CART_KEY) == storage.get(ORIGINAL_CART_KEY)
    assert '"quantity":2' in storage.get(CART_KEY)

    ledger.remove_from_cart("p1")
    assert storage.get(CART_KEY) == "[]"
    assert ledger.original_lines == ()


async def test_cart_restored_from_storage(products):
    storage = MemoryStorage()
    catalog = await loaded_catalog(products, storage)
    CartLedger(catalog, storage).add_to_cart("p1", 4)

    restored = CartLedger(catalog, storage)

    assert restored.quantity_of("p1") == 4
    assert restored.lines[0].name == "Shampoo"


async def test_unreadable_cart_is_empty(products):
    storage = MemoryStorage({CART_KEY: "not json"})
    catalog = await loaded_catalog(products, storage)

    assert CartLedger(catalog, storage).is_empty


async def test_storage_failures_are_logged(products, caplog):
    catalog = await loaded_catalog(products)
    with caplog.at_level(logging.WARNING):
        ledger = CartLedger(catalog, FailingStorage())
        assert ledger.add_to_cart("p1")

    assert ledger.quantity_of("p1") == 1
    assert "could not persist aymShopCart" in caplog.text
