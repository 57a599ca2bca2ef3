"""Catalog routes: product listing, detail and single-item order link."""
from __future__ import annotations

from typing import Any

from aiohttp import web

from app.api.utils import json_error, json_ok, request_language
from app.core.config import Settings
from app.core.exceptions import ProductNotFoundException
from app.core.i18n import get_available_languages, get_texts, text_direction
from app.services.catalog import Catalog
from app.services.order_message import single_item_order_link


def build_catalog_handlers(catalog: Catalog, settings: Settings) -> dict[str, Any]:
    default_lang = settings.default_language

    async def api_languages(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/languages"""
        lang = request_language(request, default_lang)
        return json_ok(
            {
                "current": lang,
                "dir": text_direction(lang),
                "languages": get_available_languages(),
            }
        )

    async def api_texts(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/texts?lang=nl"""
        lang = request_language(request, default_lang)
        return json_ok({"lang": lang, "dir": text_direction(lang), "texts": get_texts(lang)})

    async def api_catalog(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/catalog?category=robes"""
        lang = request_language(request, default_lang)
        products = catalog.by_category(request.query.get("category"))
        return json_ok(
            {
                "lang": lang,
                "categories": [c.to_dict(lang) for c in catalog.categories],
                "products": [p.to_dict(lang) for p in products],
            }
        )

    async def api_featured(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/catalog/featured"""
        lang = request_language(request, default_lang)
        return json_ok({"lang": lang, "products": [p.to_dict(lang) for p in catalog.featured()]})

    async def api_product_detail(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/products/{product_id}"""
        lang = request_language(request, default_lang)
        try:
            product = catalog.get(request.match_info["product_id"])
        except ProductNotFoundException as e:
            return json_error(e.message, status=404)
        return json_ok(product.to_dict(lang))

    async def api_product_order_link(request: web.Request) -> web.StreamResponse:
        """GET /api/v1/products/{product_id}/order-link?size=M"""
        lang = request_language(request, default_lang)
        try:
            product = catalog.get(request.match_info["product_id"])
        except ProductNotFoundException as e:
            return json_error(e.message, status=404)

        size = request.query.get("size") or (product.sizes[0] if product.sizes else "")
        if settings.strict_sizes and not product.has_size(size):
            return json_error(f"Size {size!r} is not available for product {product.id}")

        order = single_item_order_link(
            product.display_name(lang),
            size,
            product.price,
            lang,
            phone=settings.whatsapp_number,
            host=settings.whatsapp_host,
            default_language=default_lang,
        )
        return json_ok(
            {"lang": order.lang, "message": order.body, "total": order.total, "link": order.link}
        )

    return {
        "languages": api_languages,
        "texts": api_texts,
        "catalog": api_catalog,
        "featured": api_featured,
        "product_detail": api_product_detail,
        "product_order_link": api_product_order_link,
    }
