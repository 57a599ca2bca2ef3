"""Cart routes: the only mutation surface of the storefront API."""
from __future__ import annotations

from typing import Any

from aiohttp import web

from app.api.utils import json_error, json_ok, read_json_body, request_language
from app.core.config import Settings
from app.core.exceptions import ProductNotFoundException, StorefrontException
from app.services.cart_store import CartStore
from app.services.catalog import Catalog
from app.services.order_message import cart_order_link
from logging_config import logger


def _parse_quantity(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    # JSON clients may send 3.0 for 3
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def build_cart_handlers(store: CartStore, catalog: Catalog, settings: Settings) -> dict[str, Any]:
    default_lang = settings.default_language

    def _snapshot(request: web.Request, status: int = 200) -> web.StreamResponse:
        return json_ok(store.to_dict(request_language(request, default_lang)), status=status)

    async def api_get_cart(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/cart"""
        return _snapshot(request)

    async def api_add_item(request: web.Request) -> web.StreamResponse:
        """POST /api/v1/cart/items {"product_id": ..., "size": ...}"""
        data = await read_json_body(request)
        product_id = str(data.get("product_id") or "")
        size = str(data.get("size") or "")
        if not product_id or not size:
            return json_error("product_id and size required")

        try:
            product = catalog.get(product_id)
            store.add_item(product, size)
        except ProductNotFoundException as e:
            return json_error(e.message, status=404)
        except StorefrontException as e:
            logger.warning(f"API cart add rejected: {e.message}")
            return json_error(e.message)
        return _snapshot(request, status=201)

    async def api_update_item(request: web.Request) -> web.StreamResponse:
        """PATCH /api/v1/cart/items {"product_id": ..., "size": ..., "quantity": n}"""
        data = await read_json_body(request)
        product_id = str(data.get("product_id") or "")
        size = str(data.get("size") or "")
        quantity = _parse_quantity(data.get("quantity"))
        if not product_id or not size or quantity is None:
            return json_error("product_id, size and integer quantity required")

        store.update_quantity(product_id, size, quantity)
        return _snapshot(request)

    async def api_remove_item(request: web.Request) -> web.StreamResponse:
        """DELETE /api/v1/cart/items?product_id=...&size=..."""
        product_id = request.query.get("product_id", "")
        size = request.query.get("size", "")
        if not product_id or not size:
            return json_error("product_id and size required")

        store.remove_item(product_id, size)
        return _snapshot(request)

    async def api_clear_cart(request: web.Request) -> web.StreamResponse:
        """POST /api/v1/cart/clear"""
        store.clear_cart()
        return _snapshot(request)

    async def api_set_drawer(request: web.Request) -> web.StreamResponse:
        """POST /api/v1/cart/drawer {"open": true}"""
        data = await read_json_body(request)
        if not isinstance(data.get("open"), bool):
            return json_error("boolean 'open' required")
        store.set_drawer_open(data["open"])
        return _snapshot(request)

    async def api_checkout(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/cart/checkout - WhatsApp message and link for the cart."""
        lang = request_language(request, default_lang)
        order = cart_order_link(
            store.line_items,
            lang,
            phone=settings.whatsapp_number,
            host=settings.whatsapp_host,
            default_language=default_lang,
        )
        return json_ok(
            {
                "lang": order.lang,
                "message": order.body,
                "total": order.total,
                "total_items": store.total_items,
                "link": order.link,
            }
        )

    return {
        "get_cart": api_get_cart,
        "add_item": api_add_item,
        "update_item": api_update_item,
        "remove_item": api_remove_item,
        "clear_cart": api_clear_cart,
        "set_drawer": api_set_drawer,
        "checkout": api_checkout,
    }
