"""
Entry point.

Run: python -m examples.shop.main

With STOREFRONT_API_URL set the catalog comes from the proxy
(python -m storefront.proxy); otherwise from the seed records.
"""

import asyncio
import logging
import os

from storefront import Storefront, ClientSettings
from storefront.storage import SqlStorage
from examples.shop.cli import run_cli
from examples.shop.seed import seed_source


def build() -> Storefront:
    settings = ClientSettings.from_env()
    if os.getenv("STOREFRONT_API_URL"):
        return Storefront.from_settings(settings)
    return Storefront.create(seed_source(), SqlStorage.from_url(settings.db_url), settings=settings)


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(run_cli(build()))
