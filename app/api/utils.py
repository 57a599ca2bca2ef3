"""Shared helpers for the storefront JSON API routes."""
from __future__ import annotations

import json
import os
import urllib.parse
from typing import Any

from aiohttp import web

from app.core.i18n import detect_language, resolve_language
from logging_config import logger

_ALLOW_METHODS = "GET, POST, PATCH, DELETE, OPTIONS"
_ALLOW_HEADERS = "Content-Type, Accept-Language"


def _origin_from_url(value: str | None) -> str | None:
    if not value:
        return None
    try:
        parsed = urllib.parse.urlsplit(value.strip())
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None
    return f"{parsed.scheme}://{parsed.netloc}"


def _resolve_cors_origin() -> str:
    environment = os.getenv("ENVIRONMENT", "production").lower()
    is_dev = environment in ("development", "dev", "local", "test")

    origin = _origin_from_url(os.getenv("STOREFRONT_ORIGIN")) or _origin_from_url(
        os.getenv("STOREFRONT_URL")
    )
    if origin:
        return origin

    if not is_dev:
        logger.warning("CORS origin not configured; falling back to '*'")
    return "*"


_CORS_ALLOW_ORIGIN = _resolve_cors_origin()


async def cors_preflight(request: web.Request) -> web.Response:
    """Handle CORS preflight requests."""
    return web.Response(
        status=200,
        headers={
            "Access-Control-Allow-Origin": _CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Methods": _ALLOW_METHODS,
            "Access-Control-Allow-Headers": _ALLOW_HEADERS,
            "Access-Control-Max-Age": "86400",
        },
    )


def _cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": _CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": _ALLOW_METHODS,
        "Access-Control-Allow-Headers": _ALLOW_HEADERS,
    }


def add_cors_headers(response: web.StreamResponse) -> web.StreamResponse:
    """Add CORS headers to response."""
    response.headers.update(_cors_headers())
    return response


def json_ok(payload: Any, status: int = 200) -> web.StreamResponse:
    return add_cors_headers(web.json_response(payload, status=status))


def json_error(message: str, status: int = 400) -> web.StreamResponse:
    return add_cors_headers(web.json_response({"error": message}, status=status))


def request_language(request: web.Request, default: str) -> str:
    """Language from ?lang=, then Accept-Language, then the configured default."""
    lang = request.query.get("lang")
    if lang:
        return resolve_language(lang, default)
    return detect_language(request.headers.get("Accept-Language"), default)


async def read_json_body(request: web.Request) -> dict[str, Any]:
    """Decode a JSON object body; anything else is a 400."""
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise web.HTTPBadRequest(
            text=json.dumps({"error": f"invalid JSON body: {e}"}),
            content_type="application/json",
            headers=_cors_headers(),
        ) from e
    if not isinstance(data, dict):
        raise web.HTTPBadRequest(
            text=json.dumps({"error": "JSON object expected"}),
            content_type="application/json",
            headers=_cors_headers(),
        )
    return data
