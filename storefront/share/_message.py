"""
Order message and messaging deep link.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from storefront.checkout import OrderRecord
from storefront.pricing import CURRENCY, format_number

WHATSAPP_NUMBER = "93789281770"
SHOP_NAME = "فروشگاه آنلاین AYM"

DATE_FORMAT = "%Y/%m/%d"
TIME_FORMAT = "%H:%M:%S"

# unreserved marks left as-is by encodeURIComponent
_URI_SAFE = "!~*'()"


@dataclass(frozen=True, slots=True)
class ShareItem:
    name: str
    quantity: int
    line_total: int


def share_items(order: OrderRecord) -> list[ShareItem]:
    """The committed lines, never the live cart."""
    return [ShareItem(l.name, l.quantity, l.line_total) for l in order.lines]


def order_message(order: OrderRecord) -> str:
    items = share_items(order)
    customer = order.customer

    items_text = "".join(
        f"{n}. {i.name} - {i.quantity} عدد - {format_number(i.line_total)} {CURRENCY}\n"
        for n, i in enumerate(items, start=1)
    )

    return (
        f"📱 *سفارش جدید از {SHOP_NAME}*\n"
        f"\n"
        f"🔖 *شماره بل:* {order.serial}\n"
        f"\n"
        f"👤 *مشتری:* {customer.name or 'مشتری'}\n"
        f"📞 *شماره تماس:* {customer.phone or 'بدون شماره'}\n"
        f"📍 *آدرس:* {customer.address or 'بدون آدرس'}\n"
        f"\n"
        f"🛒 *اقلام سفارش:*\n"
        f"{items_text}\n"
        f"\n"
        f"💰 *مبلغ کل:* {format_number(order.total)} {CURRENCY}\n"
        f"\n"
        f"📅 *تاریخ:* {order.created_at.strftime(DATE_FORMAT)}\n"
        f"⏰ *زمان:* {order.created_at.strftime(TIME_FORMAT)}\n"
        f"\n"
        f"_لطفاً پس از بررسی موجودی، سفارش را تایید کنید._"
    )


def whatsapp_link(message: str, number: str = WHATSAPP_NUMBER) -> str:
    """https://wa.me/<number>?text=<message, URI-component encoded>."""
    return f"https://wa.me/{number}?text={quote(message, safe=_URI_SAFE)}"


def share_link(
    order: OrderRecord,
    *,
    number: str = WHATSAPP_NUMBER,
) -> str:
    return whatsapp_link(order_message(order), number)


__all__ = (
    "WHATSAPP_NUMBER",
    "SHOP_NAME",
    "ShareItem",
    "share_items",
    "order_message",
    "whatsapp_link",
    "share_link",
)
