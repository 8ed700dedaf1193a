"""
Share — the order as a messaging deep link or a printable bill.

    from storefront import share as Sh

    Sh.share_link(order)
    Sh.render_print_view(order)
"""

from __future__ import annotations

from storefront.share._message import (
    WHATSAPP_NUMBER,
    SHOP_NAME,
    ShareItem,
    share_items,
    order_message,
    whatsapp_link,
    share_link,
)
from storefront.share._print import SUPPORT_PHONE, render_print_view

__all__ = (
    "WHATSAPP_NUMBER",
    "SHOP_NAME",
    "ShareItem",
    "share_items",
    "order_message",
    "whatsapp_link",
    "share_link",
    "SUPPORT_PHONE",
    "render_print_view",
)
