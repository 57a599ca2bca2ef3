"""Shared helpers for cart totals and quantities."""
from __future__ import annotations

from collections.abc import Iterable

from app.domain.cart import LineItem


def calc_line_total(price: int, quantity: int) -> int:
    return int(price) * int(quantity)


def calc_items_total(line_items: Iterable[LineItem]) -> int:
    return sum(calc_line_total(item.product.price, item.quantity) for item in line_items)


def calc_quantity(line_items: Iterable[LineItem]) -> int:
    return sum(int(item.quantity) for item in line_items)
