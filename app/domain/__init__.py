"""Domain package."""

from .cart import LineItem
from .product import Product, ensure_valid_product

__all__ = [
    "LineItem",
    "Product",
    "ensure_valid_product",
]
