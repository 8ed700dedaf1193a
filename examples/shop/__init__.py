"""
Shop Example — the storefront in a terminal.

Structure:
- seed.py  — Sheet-shaped records for an offline catalog
- cli.py   — Interactive CLI (grid, search, cart, checkout, share)
- main.py  — Entry point

Run: python -m examples.shop.main
     STOREFRONT_API_URL=http://localhost:8000 python -m examples.shop.main
"""
