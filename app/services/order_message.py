"""WhatsApp order message builders.

Both variants share one layout::

    <header>
    <item line>
    ...
    <blank line>
    <total line>

The body is percent-encoded the way ``encodeURIComponent`` does it and placed
in the single ``text`` parameter of ``https://<host>/<phone>``.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from urllib.parse import quote

from app.core.constants import URI_COMPONENT_SAFE, WHATSAPP_HOST, WHATSAPP_NUMBER
from app.core.i18n import DEFAULT_LANGUAGE, localized_name, resolve_language
from app.core.order_math import calc_items_total, calc_line_total
from app.domain.cart import LineItem
from localization import get_text


@dataclass(frozen=True)
class OrderMessage:
    """Composed body, its grand total and the ready-to-open link."""

    body: str
    total: int
    link: str
    lang: str


def _join_message(lang: str, lines: Sequence[str], total: int) -> str:
    header = get_text(lang, "whatsapp.message")
    total_line = get_text(lang, "order.total_line", amount=total)
    return "\n".join([header, *lines, "", total_line])


def calc_message_total(line_items: Iterable[LineItem]) -> int:
    return calc_items_total(line_items)


def compose_single_item_message(
    display_name: str,
    size: str,
    unit_price: int,
    lang: str | None,
    default_language: str = DEFAULT_LANGUAGE,
) -> str:
    """Message for ordering one item straight from the product page."""
    language = resolve_language(lang, default_language)
    line = get_text(
        language, "order.single_line", name=display_name, size=size, amount=int(unit_price)
    )
    return _join_message(language, [line], int(unit_price))


def compose_cart_message(
    line_items: Iterable[LineItem],
    lang: str | None,
    default_language: str = DEFAULT_LANGUAGE,
) -> str:
    """Message for the whole cart; lines keep the cart's insertion order."""
    language = resolve_language(lang, default_language)
    items = list(line_items)
    lines = [
        get_text(
            language,
            "order.cart_line",
            name=localized_name(item.product.name, language),
            size=item.size,
            quantity=item.quantity,
            amount=calc_line_total(item.product.price, item.quantity),
        )
        for item in items
    ]
    return _join_message(language, lines, calc_message_total(items))


def build_order_link(
    body: str,
    phone: str = WHATSAPP_NUMBER,
    host: str = WHATSAPP_HOST,
) -> str:
    return f"https://{host}/{phone}?text={quote(body, safe=URI_COMPONENT_SAFE)}"


def single_item_order_link(
    display_name: str,
    size: str,
    unit_price: int,
    lang: str | None,
    phone: str = WHATSAPP_NUMBER,
    host: str = WHATSAPP_HOST,
    default_language: str = DEFAULT_LANGUAGE,
) -> OrderMessage:
    language = resolve_language(lang, default_language)
    body = compose_single_item_message(display_name, size, unit_price, language)
    return OrderMessage(
        body=body,
        total=int(unit_price),
        link=build_order_link(body, phone=phone, host=host),
        lang=language,
    )


def cart_order_link(
    line_items: Iterable[LineItem],
    lang: str | None,
    phone: str = WHATSAPP_NUMBER,
    host: str = WHATSAPP_HOST,
    default_language: str = DEFAULT_LANGUAGE,
) -> OrderMessage:
    language = resolve_language(lang, default_language)
    items = list(line_items)
    body = compose_cart_message(items, language)
    return OrderMessage(
        body=body,
        total=calc_message_total(items),
        link=build_order_link(body, phone=phone, host=host),
        lang=language,
    )
