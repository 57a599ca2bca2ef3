"""Catalog product as consumed by the cart."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.core.exceptions import MalformedProductException
from app.core.i18n import SUPPORTED_LANGUAGES, format_currency, localized_name


@dataclass(frozen=True)
class Product:
    """Read-only catalog entry. Prices are whole dirhams."""

    id: str
    name: dict[str, str]
    price: int
    sizes: tuple[str, ...]
    description: dict[str, str] = field(default_factory=dict)
    category: str = ""
    image: str = ""
    is_featured: bool = False
    stock_qty: int | None = None

    @property
    def in_stock(self) -> bool:
        """Products without a stock figure are treated as available."""
        return self.stock_qty is None or self.stock_qty > 0

    def display_name(self, lang: str | None) -> str:
        return localized_name(self.name, lang)

    def has_size(self, size: str) -> bool:
        return size in self.sizes

    def to_dict(self, lang: str | None = None) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": dict(self.name),
            "description": dict(self.description),
            "category": self.category,
            "price": self.price,
            "sizes": list(self.sizes),
            "image": self.image,
            "is_featured": self.is_featured,
            "stock_qty": self.stock_qty,
            "in_stock": self.in_stock,
        }
        if lang is not None:
            data["display_name"] = self.display_name(lang)
            data["display_description"] = localized_name(self.description, lang)
            data["display_price"] = format_currency(self.price, lang)
        return data


def ensure_valid_product(product: Any) -> None:
    """Fail fast on a product that would corrupt cart lines or totals."""
    if product is None:
        raise MalformedProductException(None, "product is missing")

    product_id = getattr(product, "id", None)
    if not isinstance(product_id, str) or not product_id.strip():
        raise MalformedProductException(product_id, "missing id")

    names = getattr(product, "name", None)
    if not isinstance(names, dict) or not any(
        isinstance(names.get(lang), str) and names[lang].strip() for lang in SUPPORTED_LANGUAGES
    ):
        raise MalformedProductException(product_id, "no localized name in a supported language")

    price = getattr(product, "price", None)
    if isinstance(price, bool) or not isinstance(price, int) or price < 0:
        raise MalformedProductException(product_id, f"invalid price {price!r}")
