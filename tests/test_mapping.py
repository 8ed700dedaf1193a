from urllib.parse import quote

from storefront.catalog import (
    map_record,
    map_records,
    parse_stock,
    collect_images,
    placeholder_for,
    placeholder_image,
    ProductPayload,
    DEFAULT_CATEGORY,
    DEFAULT_DESCRIPTION,
    DEFAULT_PRICE,
)


def test_record_without_name_is_skipped():
    assert map_record({"id": "rec1", "fields": {"قیمت": "10"}}) is None
    assert map_record({"id": "rec1"}) is None


def test_defaults_fill_missing_fields():
    p = map_record({"id": "recABCDEF", "fields": {"Name": "Soap"}})

    assert p is not None
    assert p.code == "CODE-recA"
    assert p.description == DEFAULT_DESCRIPTION
    assert p.full_description == DEFAULT_DESCRIPTION
    assert p.price == DEFAULT_PRICE
    assert p.stock == 0
    assert p.category == DEFAULT_CATEGORY


def test_first_non_empty_candidate_wins():
    p = map_record({
        "id": "rec1",
        "fields": {"نام": "", "Name": "Soap", "Product Name": "Other", "قیمت (افغانی)": "50", "دسته": "عطر"},
    })

    assert p.name == "Soap"
    assert p.price == "50"
    assert p.category == "عطر"


def test_full_description_falls_back_to_description():
    p = map_record({"id": "rec1", "fields": {"نام": "x", "توضیحات": "short"}})
    assert p.full_description == "short"

    p = map_record({"id": "rec1", "fields": {"نام": "x", "توضیح": "short", "Full Description": "long"}})
    assert p.full_description == "long"


def test_parse_stock():
    assert parse_stock("12 pcs") == 12
    assert parse_stock("n/a") == 0
    assert parse_stock("-3") == 0
    assert parse_stock(-3) == 0
    assert parse_stock(4.7) == 4
    assert parse_stock(None) == 0
    assert parse_stock(True) == 0


def test_images_from_known_and_discovered_fields_deduplicated():
    fields = {
        "تصویر": [{"url": "a.jpg"}, {"url": "b.jpg"}],
        "Main Image": {"url": "a.jpg"},
        "gallery": [{"url": "c.jpg"}, {"nourl": 1}],
        "notes": ["not", "attachments"],
    }
    assert collect_images(fields) == ["a.jpg", "b.jpg", "c.jpg"]


def test_placeholder_when_no_images():
    p = map_record({"id": "rec1", "fields": {"نام": "book", "دسته‌بندی": "کتاب"}})

    assert p.images == (placeholder_image("کتاب"),)
    assert p.images[0].startswith("data:image/svg+xml,<svg")
    assert quote("📚") in p.images[0]
    assert "%23f5f5f5" in p.images[0]


def test_placeholder_glyphs():
    assert placeholder_for("عطر") == "🌸"
    assert placeholder_for("unknown") == "📦"


def test_map_records_keeps_order_and_drops_nameless():
    products = map_records([
        {"id": "r1", "fields": {"نام": "a"}},
        {"id": "r2", "fields": {}},
        {"id": "r3", "fields": {"نام": "c"}},
    ])
    assert [p.id for p in products] == ["r1", "r3"]


def test_payload_normalises_loose_input():
    payload = ProductPayload.model_validate({
        "id": "rec1",
        "name": "Soap",
        "fullDescription": "long",
        "price": 1250,
        "stock": "7 left",
        "images": [],
    })
    product = payload.to_domain()

    assert product.full_description == "long"
    assert product.price == "1250"
    assert product.stock == 7
    assert product.images == (placeholder_image(DEFAULT_CATEGORY),)


def test_payload_uses_camel_case_on_the_wire():
    p = map_record({"id": "rec1", "fields": {"نام": "x", "توضیح کامل": "long"}})
    dumped = ProductPayload.from_domain(p).model_dump(by_alias=True)

    assert dumped["fullDescription"] == "long"
    assert "full_description" not in dumped
