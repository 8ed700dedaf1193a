"""
Field mapping — raw spreadsheet records → Product.

The sheet is edited by hand, in two languages, so every field has
several candidate column names. First non-empty candidate wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from storefront.catalog._types import (
    Product,
    DEFAULT_CATEGORY,
    DEFAULT_DESCRIPTION,
    DEFAULT_PRICE,
)
from storefront.catalog._placeholder import placeholder_image

# ═══════════════════════════════════════════════════════════════════════════════
# Candidate column names
# ═══════════════════════════════════════════════════════════════════════════════

NAME_FIELDS = ("نام", "Name", "Product Name")
CODE_FIELDS = ("کود", "Code", "Product Code")
DESCRIPTION_FIELDS = ("توضیح", "Description", "توضیحات")
FULL_DESCRIPTION_FIELDS = ("توضیح کامل", "Full Description", "توضیحات کامل")
PRICE_FIELDS = ("قیمت", "Price", "قیمت (افغانی)")
STOCK_FIELDS = ("موجودی", "Stock", "تعداد")
CATEGORY_FIELDS = ("دسته‌بندی", "Category", "دسته")
IMAGE_FIELDS = ("تصویر", "عکس", "Image", "Picture", "Photo")

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════

def first_present(fields: Mapping[str, Any], names: Iterable[str]) -> Any:
    """First truthy value among candidate names, else None."""
    for name in names:
        value = fields.get(name)
        if value:
            return value
    return None


def parse_stock(value: Any) -> int:
    """
    Leading integer of the value, clamped at 0.

    "12 pcs" -> 12, "n/a" -> 0, -3 -> 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(int(match.group()), 0)


def extract_images(attachments: Any) -> list[str]:
    """URLs from an attachment list, a single attachment, or nothing."""
    if not attachments:
        return []
    if isinstance(attachments, list):
        return [
            att["url"]
            for att in attachments
            if isinstance(att, Mapping) and att.get("url")
        ]
    if isinstance(attachments, Mapping) and attachments.get("url"):
        return [attachments["url"]]
    return []


def _looks_like_attachments(value: Any) -> bool:
    return (
        isinstance(value, list)
        and bool(value)
        and isinstance(value[0], Mapping)
        and bool(value[0].get("url"))
    )


def collect_images(fields: Mapping[str, Any]) -> list[str]:
    """
    Images from the known columns, then from any image-ish column.

    Deduplicated, first-seen order kept.
    """
    found: list[str] = []
    for name in IMAGE_FIELDS:
        found.extend(extract_images(fields.get(name)))

    for key, value in fields.items():
        lowered = key.lower()
        if "image" in lowered or "pic" in lowered or _looks_like_attachments(value):
            found.extend(extract_images(value))

    return list(dict.fromkeys(found))


# ═══════════════════════════════════════════════════════════════════════════════
# map_record
# ═══════════════════════════════════════════════════════════════════════════════

def map_record(record: Mapping[str, Any]) -> Product | None:
    """
    Map one raw record ({"id": ..., "fields": {...}}) to a Product.

    Records without any name column are skipped (None).
    """
    record_id = str(record.get("id") or "")
    fields: Mapping[str, Any] = record.get("fields") or {}

    name = first_present(fields, NAME_FIELDS)
    if not name:
        return None

    description = first_present(fields, DESCRIPTION_FIELDS)
    category = str(first_present(fields, CATEGORY_FIELDS) or DEFAULT_CATEGORY)
    images = collect_images(fields) or [placeholder_image(category)]

    return Product(
        id=record_id,
        name=str(name),
        code=str(first_present(fields, CODE_FIELDS) or f"CODE-{record_id[:4]}"),
        description=str(description or DEFAULT_DESCRIPTION),
        full_description=str(
            first_present(fields, FULL_DESCRIPTION_FIELDS)
            or description
            or DEFAULT_DESCRIPTION
        ),
        price=str(first_present(fields, PRICE_FIELDS) or DEFAULT_PRICE),
        stock=parse_stock(first_present(fields, STOCK_FIELDS)),
        category=category,
        images=tuple(images),
    )


def map_records(records: Iterable[Mapping[str, Any]]) -> list[Product]:
    """Map a batch, dropping skipped records."""
    products: list[Product] = []
    for record in records:
        product = map_record(record)
        if product is not None:
            products.append(product)
    return products


__all__ = (
    "NAME_FIELDS",
    "CODE_FIELDS",
    "DESCRIPTION_FIELDS",
    "FULL_DESCRIPTION_FIELDS",
    "PRICE_FIELDS",
    "STOCK_FIELDS",
    "CATEGORY_FIELDS",
    "IMAGE_FIELDS",
    "first_present",
    "parse_stock",
    "extract_images",
    "collect_images",
    "map_record",
    "map_records",
)
