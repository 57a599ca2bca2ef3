"""Cart line item."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.product import Product


@dataclass(frozen=True)
class LineItem:
    """Single (product, size) line in the cart."""

    product: Product
    size: str
    quantity: int = 1

    @property
    def key(self) -> tuple[str, str]:
        return (self.product.id, self.size)

    @property
    def subtotal(self) -> int:
        return self.product.price * self.quantity

    def matches(self, product_id: str, size: str) -> bool:
        return self.product.id == product_id and self.size == size

    def to_dict(self, lang: str | None = None) -> dict[str, Any]:
        return {
            "product_id": self.product.id,
            "name": self.product.display_name(lang),
            "size": self.size,
            "quantity": self.quantity,
            "unit_price": self.product.price,
            "subtotal": self.subtotal,
            "image": self.product.image,
        }
