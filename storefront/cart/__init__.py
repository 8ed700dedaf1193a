"""
Cart — the ledger of cart lines, checked against live stock.

    from storefront import cart as C

    ledger = C.CartLedger(catalog, storage)
    ledger.add_to_cart(product_id, 2)
    ledger.total()
"""

from __future__ import annotations

from storefront.cart._types import CartLine, CartLinePayload
from storefront.cart._ledger import CartLedger

__all__ = ("CartLine", "CartLinePayload", "CartLedger")
