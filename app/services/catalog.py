"""Read-only product catalog loaded from a JSON export of the products table."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from app.core.constants import DEFAULT_SIZES, PLACEHOLDER_IMAGE
from app.core.exceptions import CatalogException, MalformedProductException, ProductNotFoundException
from app.core.i18n import SUPPORTED_LANGUAGES, localized_name
from app.domain.product import Product, ensure_valid_product
from logging_config import logger


class ProductRow(BaseModel):
    """One row of the products table."""

    id: str = Field(..., min_length=1)
    name_ar: Optional[str] = None
    name_fr: Optional[str] = None
    name_nl: Optional[str] = None
    description_ar: Optional[str] = None
    description_fr: Optional[str] = None
    description_nl: Optional[str] = None
    category: str = ""
    price: int = Field(..., ge=0, description="Unit price in dirhams")
    sizes: Optional[list[str]] = None
    image_url: Optional[str] = None
    is_featured: bool = False
    stock_qty: Optional[int] = Field(None, ge=0)
    created_at: Optional[datetime] = None

    @field_validator("sizes")
    @classmethod
    def drop_blank_sizes(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        if v is None:
            return None
        cleaned = [s.strip() for s in v if s and s.strip()]
        return cleaned or None

    def to_product(self) -> Product:
        names = {
            lang: value
            for lang in SUPPORTED_LANGUAGES
            if (value := getattr(self, f"name_{lang}"))
        }
        descriptions = {
            lang: value
            for lang in SUPPORTED_LANGUAGES
            if (value := getattr(self, f"description_{lang}"))
        }
        return Product(
            id=self.id,
            name=names,
            price=self.price,
            sizes=tuple(self.sizes or DEFAULT_SIZES),
            description=descriptions,
            category=self.category,
            image=self.image_url or PLACEHOLDER_IMAGE,
            is_featured=self.is_featured,
            stock_qty=self.stock_qty,
        )


@dataclass(frozen=True)
class Category:
    slug: str
    name: dict[str, str] = field(default_factory=dict)

    def to_dict(self, lang: str | None = None) -> dict[str, Any]:
        data: dict[str, Any] = {"slug": self.slug, "name": dict(self.name)}
        if lang is not None:
            data["display_name"] = localized_name(self.name, lang) or self.slug
        return data


class Catalog:
    """In-memory catalog; products are kept newest first."""

    def __init__(self, products: list[Product], categories: list[Category] | None = None):
        self._products = list(products)
        self._by_id = {product.id: product for product in self._products}
        self._categories = list(categories or [])

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    def find(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def get(self, product_id: str) -> Product:
        product = self.find(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    def featured(self) -> list[Product]:
        return [p for p in self._products if p.is_featured]

    def by_category(self, slug: str | None) -> list[Product]:
        if not slug:
            return self.products
        return [p for p in self._products if p.category == slug]

    def in_stock(self) -> list[Product]:
        return [p for p in self._products if p.in_stock]


def parse_catalog(data: dict[str, Any]) -> Catalog:
    """Build a catalog from decoded JSON; malformed rows are logged and skipped."""
    rows: list[ProductRow] = []
    for raw in data.get("products") or []:
        try:
            row = ProductRow.model_validate(raw)
            ensure_valid_product(row.to_product())
        except (ValidationError, MalformedProductException) as e:
            row_id = raw.get("id") if isinstance(raw, dict) else None
            logger.warning(f"Skipping catalog row {row_id!r}: {e}")
            continue
        rows.append(row)

    # Newest first, rows without a date keep file order at the end
    dated = sorted(
        (r for r in rows if r.created_at is not None),
        key=lambda r: r.created_at.timestamp(),
        reverse=True,
    )
    undated = [r for r in rows if r.created_at is None]
    products = [row.to_product() for row in [*dated, *undated]]

    categories = []
    for raw in data.get("categories") or []:
        if not isinstance(raw, dict):
            continue
        slug = str(raw.get("slug") or "").strip()
        if not slug:
            logger.warning(f"Skipping category without slug: {raw!r}")
            continue
        names = {lang: raw[f"name_{lang}"] for lang in SUPPORTED_LANGUAGES if raw.get(f"name_{lang}")}
        categories.append(Category(slug=slug, name=names))

    return Catalog(products, categories)


def load_catalog(path: str | Path) -> Catalog:
    """Load the catalog JSON file."""
    catalog_path = Path(path)
    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogException(f"Cannot read catalog {catalog_path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogException(f"Catalog {catalog_path} must be a JSON object")

    catalog = parse_catalog(data)
    logger.info(f"Catalog loaded: {len(catalog)} products, {len(catalog.categories)} categories")
    return catalog
