#!/usr/bin/env python3
"""
Add a product to the catalog.

Usage:
  python scripts/add_product.py --name "Basic" --price "₪299" [--description ...] [--feature a --feature b]
"""
from __future__ import annotations

import argparse
import sys

from landing.core.config import get_settings
from landing.core.errors import ContentValidationError
from landing.core.logging_setup import configure_logging
from landing.domain.content import Product
from landing.services.content_service import build_content_service


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a product to the landing page")
    ap.add_argument("--name", required=True, help="Product name")
    ap.add_argument("--price", required=True, help="Display price (e.g. ₪299)")
    ap.add_argument("--description", default="", help="Short description")
    ap.add_argument("--feature", action="append", default=[], help="Feature line (repeatable)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    svc = build_content_service(settings)
    svc.init_data()

    product = Product(
        name=(args.name or "").strip(),
        price=(args.price or "").strip(),
        description=(args.description or "").strip(),
        features=[f.strip() for f in args.feature if f.strip()],
    )
    try:
        stored = svc.add_product(product)
    except ContentValidationError as exc:
        raise SystemExit(f"Invalid product: {exc.message}")

    print("OK: product added")
    print(f"  ID: {stored.id}")
    print(f"  Name: {stored.name}")
    print(f"  Price: {stored.price}")
    if stored.features:
        print(f"  Features: {', '.join(stored.features)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
