"""In-process cart store: ordered line items, derived totals and drawer flag."""
from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any

from app.core.exceptions import InvalidSizeException
from app.core.order_math import calc_items_total, calc_quantity
from app.domain.cart import LineItem
from app.domain.product import Product, ensure_valid_product
from logging_config import logger


class CartStore:
    """Single owner of the cart state for one browsing session.

    Line items keep the order in which their (product id, size) key was first
    added. Quantities are always >= 1; totals are recomputed on every read.
    """

    def __init__(self, strict_sizes: bool = False):
        self._strict_sizes = strict_sizes
        self._items: list[LineItem] = []
        self._is_open = False
        self._lock = threading.Lock()

    def _find_index(self, product_id: str, size: str) -> int | None:
        for idx, item in enumerate(self._items):
            if item.matches(product_id, size):
                return idx
        return None

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def total_items(self) -> int:
        return calc_quantity(self._items)

    @property
    def total_price(self) -> int:
        return calc_items_total(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def get_item(self, product_id: str, size: str) -> LineItem | None:
        idx = self._find_index(product_id, size)
        return self._items[idx] if idx is not None else None

    def add_item(self, product: Product, size: str) -> LineItem:
        ensure_valid_product(product)
        if self._strict_sizes and not product.has_size(size):
            logger.warning("Rejected add_item: size %s not offered for product %s", size, product.id)
            raise InvalidSizeException(product.id, size)

        with self._lock:
            idx = self._find_index(product.id, size)
            if idx is not None:
                item = replace(self._items[idx], quantity=self._items[idx].quantity + 1)
                self._items[idx] = item
            else:
                item = LineItem(product=product, size=size, quantity=1)
                self._items.append(item)
            self._is_open = True

        logger.debug("Cart add: %s/%s -> qty %s", product.id, size, item.quantity)
        return item

    def remove_item(self, product_id: str, size: str) -> bool:
        with self._lock:
            idx = self._find_index(product_id, size)
            if idx is None:
                return False
            del self._items[idx]

        logger.debug("Cart remove: %s/%s", product_id, size)
        return True

    def update_quantity(self, product_id: str, size: str, quantity: int) -> bool:
        quantity = int(quantity)
        if quantity <= 0:
            return self.remove_item(product_id, size)

        with self._lock:
            idx = self._find_index(product_id, size)
            if idx is None:
                return False
            self._items[idx] = replace(self._items[idx], quantity=quantity)

        logger.debug("Cart update: %s/%s -> qty %s", product_id, size, quantity)
        return True

    def clear_cart(self) -> None:
        with self._lock:
            self._items.clear()
        logger.debug("Cart cleared")

    def set_drawer_open(self, open: bool) -> None:
        self._is_open = bool(open)

    def to_dict(self, lang: str | None = None) -> dict[str, Any]:
        items = self.line_items
        return {
            "items": [item.to_dict(lang) for item in items],
            "total_items": calc_quantity(items),
            "total_price": calc_items_total(items),
            "is_open": self._is_open,
        }
