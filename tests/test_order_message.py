"""Tests for WhatsApp order message composition."""
from __future__ import annotations

import re
from dataclasses import replace
from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from app.domain.cart import LineItem
from app.services.cart_store import CartStore
from app.services.order_message import (
    build_order_link,
    calc_message_total,
    cart_order_link,
    compose_cart_message,
    compose_single_item_message,
    single_item_order_link,
)


def _decoded_text(link: str) -> str:
    query = urlsplit(link).query
    assert query.startswith("text=")
    return unquote(query[len("text="):])


def _total_from_body(body: str) -> int:
    last_line = body.splitlines()[-1]
    return int(re.search(r"\d+", last_line).group())


@pytest.fixture()
def filled_store(store, product_a, product_b) -> CartStore:
    store.add_item(product_a, "M")
    store.add_item(product_a, "M")
    store.add_item(product_b, "L")
    return store


class TestCartMessage:
    """Test the cart variant of the message."""

    def test_french_body(self, filled_store) -> None:
        body = compose_cart_message(filled_store.line_items, "fr")
        assert body == (
            "Bonjour, je souhaite commander:\n"
            "• Robe A - Taille: M - Qté: 2 - 200 DH\n"
            "• Jelbab B - Taille: L - Qté: 1 - 50 DH\n"
            "\n"
            "Total: 250 DH"
        )

    def test_arabic_body(self, filled_store) -> None:
        body = compose_cart_message(filled_store.line_items, "ar")
        assert body == (
            "مرحباً، أريد طلب:\n"
            "• روب أ - المقاس: M - الكمية: 2 - 200 درهم\n"
            "• جلابية ب - المقاس: L - الكمية: 1 - 50 درهم\n"
            "\n"
            "المجموع: 250 درهم"
        )

    def test_dutch_body(self, filled_store) -> None:
        body = compose_cart_message(filled_store.line_items, "nl")
        assert body.splitlines() == [
            "Hallo, ik wil graag bestellen:",
            "• Jurk A - Maat: M - Aantal: 2 - 200 DH",
            "• Jelbab B - Maat: L - Aantal: 1 - 50 DH",
            "",
            "Total: 250 DH",
        ]

    def test_lines_follow_cart_order_not_price_or_name(
        self, store, product_factory
    ) -> None:
        cheap = product_factory("Z", price=10, name={"fr": "Zzz"})
        pricey = product_factory("Y", price=999, name={"fr": "Aaa"})
        store.add_item(cheap, "S")
        store.add_item(pricey, "S")

        lines = compose_cart_message(store.line_items, "fr").splitlines()
        assert lines[1].startswith("• Zzz")
        assert lines[2].startswith("• Aaa")

    @pytest.mark.parametrize("lang", ["fr", "ar", "nl", "de", None])
    def test_total_line_equals_store_total(self, filled_store, lang) -> None:
        body = compose_cart_message(filled_store.line_items, lang)
        assert _total_from_body(body) == filled_store.total_price
        assert calc_message_total(filled_store.line_items) == filled_store.total_price

    def test_total_tracks_store_after_mutations(self, filled_store, product_b) -> None:
        filled_store.update_quantity("A", "M", 5)
        filled_store.add_item(product_b, "S")
        filled_store.remove_item("B", "L")

        body = compose_cart_message(filled_store.line_items, "fr")
        assert _total_from_body(body) == filled_store.total_price == 550

    def test_unsupported_language_falls_back_to_french(self, filled_store) -> None:
        assert compose_cart_message(filled_store.line_items, "de") == compose_cart_message(
            filled_store.line_items, "fr"
        )
        assert compose_cart_message(filled_store.line_items, "fr-BE") == compose_cart_message(
            filled_store.line_items, "fr"
        )

    def test_configured_default_language(self, filled_store) -> None:
        body = compose_cart_message(filled_store.line_items, "xx", default_language="nl")
        assert body.startswith("Hallo, ik wil graag bestellen:")

    def test_name_falls_back_to_french_then_first_available(self, product_a) -> None:
        french_only = replace(product_a, id="F", name={"fr": "Robe F"})
        arabic_only = replace(product_a, id="R", name={"ar": "روب ر"})
        items = [LineItem(french_only, "M", 1), LineItem(arabic_only, "M", 1)]

        lines = compose_cart_message(items, "nl").splitlines()
        assert lines[1].startswith("• Robe F - Maat: M")
        assert lines[2].startswith("• روب ر - Maat: M")

    def test_empty_cart_message(self) -> None:
        body = compose_cart_message([], "fr")
        assert body == "Bonjour, je souhaite commander:\n\nTotal: 0 DH"

    def test_composer_does_not_mutate_store(self, filled_store) -> None:
        before = filled_store.line_items
        cart_order_link(filled_store.line_items, "ar")
        assert filled_store.line_items == before
        assert filled_store.is_open is True


class TestSingleItemMessage:
    """Test the single product variant."""

    def test_french_body(self) -> None:
        body = compose_single_item_message("Robe A", "M", 100, "fr")
        assert body == (
            "Bonjour, je souhaite commander:\n"
            "• Robe A - Taille: M - Prix: 100 DH\n"
            "\n"
            "Total: 100 DH"
        )

    def test_arabic_body(self) -> None:
        body = compose_single_item_message("روب أ", "L", 450, "ar")
        assert body.splitlines() == [
            "مرحباً، أريد طلب:",
            "• روب أ - المقاس: L - الثمن: 450 درهم",
            "",
            "المجموع: 450 درهم",
        ]

    def test_unknown_language_uses_default(self) -> None:
        assert compose_single_item_message("Robe A", "M", 100, "es") == compose_single_item_message(
            "Robe A", "M", 100, "fr"
        )

    def test_link(self) -> None:
        order = single_item_order_link("Robe A", "M", 100, "nl", phone="212600000000")
        assert order.lang == "nl"
        assert order.total == 100
        assert order.link.startswith("https://wa.me/212600000000?text=")
        assert _decoded_text(order.link) == order.body


class TestOrderLink:
    """Test deep link encoding."""

    def test_shape(self) -> None:
        link = build_order_link("Bonjour", phone="212620198762")
        assert link == "https://wa.me/212620198762?text=Bonjour"

    def test_default_destination(self) -> None:
        assert build_order_link("x").startswith("https://wa.me/212620198762?text=")

    def test_custom_host(self) -> None:
        link = build_order_link("x", phone="123", host="api.whatsapp.com")
        parts = urlsplit(link)
        assert (parts.scheme, parts.netloc, parts.path) == ("https", "api.whatsapp.com", "/123")

    def test_encodes_like_encode_uri_component(self) -> None:
        link = build_order_link("a b:c\n+&#?/é!'()*~", phone="1")
        assert link == "https://wa.me/1?text=a%20b%3Ac%0A%2B%26%23%3F%2F%C3%A9!'()*~"

    @pytest.mark.parametrize(
        "body",
        [
            "Bonjour, je souhaite commander:\n• Robe - Taille: M\n\nTotal: 100 DH",
            "Élégance & café: 50% off? #promo",
            "مرحباً، أريد طلب:\n• روب - المقاس: L\n\nالمجموع: 250 درهم",
            "Hallo + tot ziens = 2/3",
            "",
        ],
    )
    def test_round_trip(self, body) -> None:
        link = build_order_link(body, phone="212620198762")
        parts = urlsplit(link)

        assert _decoded_text(link) == body
        assert parse_qs(parts.query, keep_blank_values=True)["text"] == [body]
        assert link.count("?") == 1
        for reserved in (" ", "\n", "#"):
            assert reserved not in link
        assert "&" not in parts.query
        assert "+" not in parts.query

    def test_cart_link_round_trip(self, filled_store) -> None:
        order = cart_order_link(filled_store.line_items, "ar", phone="212600000000")
        assert order.total == filled_store.total_price
        assert _decoded_text(order.link) == order.body
        assert order.body == compose_cart_message(filled_store.line_items, "ar")

    def test_empty_cart_link(self) -> None:
        order = cart_order_link([], "fr")
        parts = urlsplit(order.link)

        assert parts.scheme == "https"
        assert parts.netloc == "wa.me"
        assert order.total == 0
        decoded = _decoded_text(order.link)
        assert decoded.splitlines()[0] == "Bonjour, je souhaite commander:"
        assert decoded.splitlines()[-1] == "Total: 0 DH"
        assert _total_from_body(decoded) == 0
