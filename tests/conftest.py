"""Shared pytest fixtures for storefront tests."""
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from app.core.config import ServerConfig, Settings
from app.domain.product import Product
from app.services.cart_store import CartStore
from app.services.catalog import Catalog, Category

ProductFactory = Callable[..., Product]


@pytest.fixture()
def product_factory() -> ProductFactory:
    """Build catalog products with sensible defaults."""

    def _make(
        product_id: str,
        price: int = 100,
        name: dict[str, str] | None = None,
        sizes: tuple[str, ...] = ("S", "M", "L", "XL"),
        category: str = "robes",
        is_featured: bool = False,
        stock_qty: int | None = None,
    ) -> Product:
        return Product(
            id=product_id,
            name=name
            if name is not None
            else {"ar": f"منتج {product_id}", "fr": f"Produit {product_id}", "nl": f"Product {product_id}"},
            price=price,
            sizes=sizes,
            category=category,
            is_featured=is_featured,
            stock_qty=stock_qty,
        )

    return _make


@pytest.fixture()
def product_a(product_factory: ProductFactory) -> Product:
    return product_factory(
        "A",
        price=100,
        name={"ar": "روب أ", "fr": "Robe A", "nl": "Jurk A"},
        is_featured=True,
    )


@pytest.fixture()
def product_b(product_factory: ProductFactory) -> Product:
    return product_factory(
        "B",
        price=50,
        name={"ar": "جلابية ب", "fr": "Jelbab B", "nl": "Jelbab B"},
        category="jelbabs",
    )


@pytest.fixture()
def store() -> CartStore:
    return CartStore()


@pytest.fixture()
def catalog(product_a: Product, product_b: Product, product_factory: ProductFactory) -> Catalog:
    sold_out = product_factory("C", price=700, category="complets", stock_qty=0)
    return Catalog(
        [product_a, product_b, sold_out],
        [
            Category(slug="robes", name={"ar": "روبات", "fr": "Robes", "nl": "Jurken"}),
            Category(slug="jelbabs", name={"ar": "جلابيات", "fr": "Jelbabs", "nl": "Jelbabs"}),
        ],
    )


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        whatsapp_number="212600000000",
        whatsapp_host="wa.me",
        default_language="fr",
        catalog_path=Path("unused.json"),
        strict_sizes=False,
        server=ServerConfig(host="127.0.0.1", port=0),
    )


@pytest.fixture()
async def api_client(settings: Settings, catalog: Catalog, store: CartStore):
    """aiohttp test client bound to the shared store fixture."""
    from aiohttp.test_utils import TestClient, TestServer

    from app.api.server import create_app

    app = create_app(settings, catalog, store)
    client = TestClient(TestServer(app))
    await client.start_server()
    try:
        yield client
    finally:
        await client.close()
