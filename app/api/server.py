"""aiohttp application for the storefront JSON API."""
from __future__ import annotations

from aiohttp import web

from app.api.routes_cart import build_cart_handlers
from app.api.routes_catalog import build_catalog_handlers
from app.api.utils import cors_preflight, json_ok
from app.core.config import Settings
from app.services.cart_store import CartStore
from app.services.catalog import Catalog
from logging_config import logger


def create_app(settings: Settings, catalog: Catalog, store: CartStore | None = None) -> web.Application:
    """Composition root: one catalog and one cart store per application."""
    if store is None:
        store = CartStore(strict_sizes=settings.strict_sizes)

    catalog_handlers = build_catalog_handlers(catalog, settings)
    cart_handlers = build_cart_handlers(store, catalog, settings)

    async def health_check(request: web.Request) -> web.StreamResponse:
        return json_ok({"status": "ok", "products": len(catalog)})

    app = web.Application()
    app.router.add_get("/health", health_check)

    app.router.add_options("/api/v1/languages", cors_preflight)
    app.router.add_get("/api/v1/languages", catalog_handlers["languages"])
    app.router.add_options("/api/v1/texts", cors_preflight)
    app.router.add_get("/api/v1/texts", catalog_handlers["texts"])
    app.router.add_options("/api/v1/catalog", cors_preflight)
    app.router.add_get("/api/v1/catalog", catalog_handlers["catalog"])
    app.router.add_options("/api/v1/catalog/featured", cors_preflight)
    app.router.add_get("/api/v1/catalog/featured", catalog_handlers["featured"])
    app.router.add_options("/api/v1/products/{product_id}", cors_preflight)
    app.router.add_get("/api/v1/products/{product_id}", catalog_handlers["product_detail"])
    app.router.add_options("/api/v1/products/{product_id}/order-link", cors_preflight)
    app.router.add_get(
        "/api/v1/products/{product_id}/order-link", catalog_handlers["product_order_link"]
    )

    app.router.add_options("/api/v1/cart", cors_preflight)
    app.router.add_get("/api/v1/cart", cart_handlers["get_cart"])
    app.router.add_options("/api/v1/cart/items", cors_preflight)
    app.router.add_post("/api/v1/cart/items", cart_handlers["add_item"])
    app.router.add_patch("/api/v1/cart/items", cart_handlers["update_item"])
    app.router.add_delete("/api/v1/cart/items", cart_handlers["remove_item"])
    app.router.add_options("/api/v1/cart/clear", cors_preflight)
    app.router.add_post("/api/v1/cart/clear", cart_handlers["clear_cart"])
    app.router.add_options("/api/v1/cart/drawer", cors_preflight)
    app.router.add_post("/api/v1/cart/drawer", cart_handlers["set_drawer"])
    app.router.add_options("/api/v1/cart/checkout", cors_preflight)
    app.router.add_get("/api/v1/cart/checkout", cart_handlers["checkout"])

    logger.info(f"Storefront API ready ({len(catalog)} products, default lang {settings.default_language})")
    return app
