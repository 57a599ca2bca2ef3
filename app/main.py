"""Storefront entry point: load settings and catalog, serve the JSON API."""
from __future__ import annotations

from aiohttp import web

from app.api.server import create_app
from app.core.config import load_settings
from app.services.cart_store import CartStore
from app.services.catalog import load_catalog
from logging_config import logger


def main() -> None:
    settings = load_settings()
    catalog = load_catalog(settings.catalog_path)
    store = CartStore(strict_sizes=settings.strict_sizes)

    app = create_app(settings, catalog, store)
    logger.info(f"Starting storefront on {settings.server.host}:{settings.server.port}")
    web.run_app(app, host=settings.server.host, port=settings.server.port, print=None)


if __name__ == "__main__":
    main()
