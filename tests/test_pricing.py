from storefront.pricing import parse_price, format_number, format_price


def test_parse_price():
    assert parse_price("1,250 افغانی") == 1250
    assert parse_price("350") == 350
    assert parse_price(900) == 900
    assert parse_price("free") == 0
    assert parse_price("") == 0
    assert parse_price(None) == 0


def test_format_number():
    assert format_number(0) == "0"
    assert format_number(999) == "999"
    assert format_number(1234567) == "1,234,567"


def test_format_price():
    assert format_price(1250) == "1,250 افغانی"
    assert format_price("1250") == "1,250 افغانی"
    assert format_price("abc") == "0 افغانی"


def test_format_price_is_stable():
    once = format_price("12,345 AFN")
    assert format_price(once) == once
    assert format_price(format_price(once)) == once
