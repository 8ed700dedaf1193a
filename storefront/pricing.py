"""
Pricing — prices travel as free-text strings ("1,250 افغانی") and are
parsed on demand.

    from storefront.pricing import parse_price, format_price

    parse_price("1,250 افغانی")   # 1250
    format_price(1250)            # "1,250 افغانی"
"""

from __future__ import annotations

import re

CURRENCY = "افغانی"

_NOT_DIGIT_OR_COMMA = re.compile(r"[^0-9,]")


def parse_price(price: str | int | None) -> int:
    """
    Parse a price string into an integer amount.

    Every character that is not an ASCII digit or a comma is dropped,
    then the thousands separators go. Anything left unparsable is 0.
    """
    if not price:
        return 0
    digits = _NOT_DIGIT_OR_COMMA.sub("", str(price)).replace(",", "")
    if not digits:
        return 0
    return int(digits)


def format_number(number: int) -> str:
    """1234567 -> '1,234,567'."""
    if not number:
        return "0"
    return f"{number:,}"


def format_price(price: str | int) -> str:
    """Normalise a price (string or amount) to '<amount> افغانی'."""
    amount = parse_price(price) if isinstance(price, str) else price
    return f"{format_number(amount)} {CURRENCY}"


__all__ = ("CURRENCY", "parse_price", "format_number", "format_price")
