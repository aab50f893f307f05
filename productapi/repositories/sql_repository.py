"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select, delete

from productapi.db.models import Product
from productapi.db.session import get_session

logger = logging.getLogger(__name__)


class ProductRepository:
    """CRUD helpers over the ``products`` table.

    Every method opens its own session and commits before returning, so each
    call is atomic on its own and nothing spans calls. Returned entities are
    detached from their session with all columns loaded.
    """

    def find_all(self) -> list[Product]:
        with get_session() as session:
            return list(session.execute(select(Product)).scalars().all())

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with get_session() as session:
            return session.get(Product, product_id)

    def save(self, product: Product) -> Product:
        """Insert when ``product.id`` is unset, otherwise overwrite that row."""
        with get_session() as session:
            if product.id is None:
                session.add(product)
            else:
                product = session.merge(product)
            session.commit()
            session.refresh(product)
            return product

    def exists_by_id(self, product_id: int) -> bool:
        with get_session() as session:
            stmt = select(Product.id).where(Product.id == product_id).limit(1)
            return session.execute(stmt).first() is not None

    def delete_by_id(self, product_id: int) -> None:
        with get_session() as session:
            session.execute(delete(Product).where(Product.id == product_id))
            session.commit()
        logger.info("Deleted product %s", product_id)

    def delete_all(self) -> None:
        with get_session() as session:
            deleted = session.execute(delete(Product)).rowcount
            session.commit()
        logger.info("Deleted all products (%s rows)", deleted)
