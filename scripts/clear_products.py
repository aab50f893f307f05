#!/usr/bin/env python3
"""
Delete every product from the configured database.

Usage:
  python scripts/clear_products.py --yes
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from productapi.repositories.sql_repository import ProductRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Delete all products")
    ap.add_argument("--yes", action="store_true", help="Confirm the deletion")
    args = ap.parse_args(argv)
    if not args.yes:
        raise SystemExit("Refusing to delete all products without --yes")

    repo = ProductRepository()
    count = len(repo.find_all())
    repo.delete_all()
    print(f"OK: {count} product(s) deleted")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
