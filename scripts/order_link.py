#!/usr/bin/env python3
"""Print the WhatsApp order message and link for one catalog product.

Usage:
  python scripts/order_link.py --product robe-1 --size M
  python scripts/order_link.py --product robe-1 --size L --lang ar
  python scripts/order_link.py --list
"""
from __future__ import annotations

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import load_settings  # noqa: E402
from app.core.exceptions import StorefrontException  # noqa: E402
from app.services.catalog import load_catalog  # noqa: E402
from app.services.order_message import single_item_order_link  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a WhatsApp order link for a product.")
    parser.add_argument("--product", help="Product id from the catalog.")
    parser.add_argument("--size", help="Size label (default: first size offered).")
    parser.add_argument("--lang", default=None, help="Language code: ar, fr or nl.")
    parser.add_argument("--catalog", default=None, help="Catalog JSON path (default: CATALOG_PATH).")
    parser.add_argument("--list", action="store_true", help="List catalog products and exit.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings()

    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)
    except StorefrontException as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1

    lang = args.lang or settings.default_language

    if args.list:
        for product in catalog.products:
            sizes = ", ".join(product.sizes)
            print(f"{product.id}: {product.display_name(lang)} - {product.price} DH [{sizes}]")
        return 0

    if not args.product:
        print("❌ --product is required (or use --list)", file=sys.stderr)
        return 2

    try:
        product = catalog.get(args.product)
    except StorefrontException as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1

    size = args.size or product.sizes[0]
    order = single_item_order_link(
        product.display_name(lang),
        size,
        product.price,
        lang,
        phone=settings.whatsapp_number,
        host=settings.whatsapp_host,
        default_language=settings.default_language,
    )
    print(order.body)
    print()
    print(order.link)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
