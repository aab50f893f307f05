#!/usr/bin/env python3
"""
Insert one product directly into the configured database.

Usage:
  python scripts/add_product.py --name Pen --quantity 10 --price 1.50
"""
from __future__ import annotations

import argparse
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Make the productapi package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from productapi.db.create_tables import create_all
from productapi.db.models import Product
from productapi.repositories.sql_repository import ProductRepository
from productapi.schemas.product import PRICE_DECIMAL_PLACES


def parse_price(value: str) -> Decimal:
    try:
        price = Decimal((value or "").strip())
    except InvalidOperation:
        raise SystemExit(f"Invalid price: {value!r}")
    if not price.is_finite():
        raise SystemExit(f"Invalid price: {value!r}")
    if price.as_tuple().exponent < -PRICE_DECIMAL_PLACES:
        raise SystemExit(f"Price allows at most {PRICE_DECIMAL_PLACES} decimal places: {value!r}")
    return price


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Insert a product")
    ap.add_argument("--name", required=True, help="Product name")
    ap.add_argument("--quantity", required=True, type=int, help="Units in stock")
    ap.add_argument("--price", required=True, help="Unit price (decimal, e.g. 1.50)")
    args = ap.parse_args(argv)

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Name must not be empty")
    price = parse_price(args.price)

    create_all()
    repo = ProductRepository()
    product = repo.save(Product(name=name, quantity=args.quantity, price=price))
    print("OK: product created")
    print(f"  ID: {product.id}")
    print(f"  Name: {product.name}")
    print(f"  Quantity: {product.quantity}")
    print(f"  Price: {product.price}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
