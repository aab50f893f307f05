"""Create (or rebuild) the products schema.

Usage:
  python -m productapi.db.create_tables [--drop]
"""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all(drop_existing: bool = False) -> list[str]:
    """Create missing tables, dropping them first when ``drop_existing``.

    Returns the names of the tables known to the metadata.
    """
    engine = get_engine()
    if drop_existing:
        Base.metadata.drop_all(bind=engine)
        logger.warning("Dropped existing product tables")
    Base.metadata.create_all(bind=engine)
    tables = sorted(Base.metadata.tables)
    logger.info("Schema ready on %s: %s", engine.url.render_as_string(hide_password=True), ", ".join(tables))
    return tables


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the product tables")
    ap.add_argument("--drop", action="store_true", help="Drop existing tables first (data is lost)")
    args = ap.parse_args(argv)
    try:
        tables = create_all(drop_existing=args.drop)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Database tables ready: {', '.join(tables)}")


if __name__ == "__main__":
    main()
