"""Storefront services: cart store, catalog and order messages."""

from .cart_store import CartStore
from .catalog import Catalog, Category, load_catalog
from .order_message import (
    OrderMessage,
    build_order_link,
    cart_order_link,
    compose_cart_message,
    compose_single_item_message,
    single_item_order_link,
)

__all__ = [
    "CartStore",
    "Catalog",
    "Category",
    "load_catalog",
    "OrderMessage",
    "build_order_link",
    "cart_order_link",
    "compose_cart_message",
    "compose_single_item_message",
    "single_item_order_link",
]
