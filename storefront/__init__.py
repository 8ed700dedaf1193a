"""
storefront — catalog, cart and checkout for a small online shop.

    from storefront import catalog as Cat   # Products & catalog store
    from storefront import cart as C        # Cart ledger
    from storefront import checkout as Co   # Validation & order records
    from storefront import search as Se     # Filter & pagination
    from storefront import share as Sh      # Deep link & print view
"""

from storefront import storage
from storefront import pricing
from storefront import catalog
from storefront import search
from storefront import cart
from storefront import checkout
from storefront import share
from storefront._types import Lazy, ProductId
from storefront._config import ClientSettings, ProxySettings
from storefront._app import Storefront

__version__ = "0.1.0"

__all__ = (
    "storage",
    "pricing",
    "catalog",
    "search",
    "cart",
    "checkout",
    "share",
    "Lazy",
    "ProductId",
    "ClientSettings",
    "ProxySettings",
    "Storefront",
)
