"""SQLAlchemy models."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, Integer, Numeric, String

from .session import Base

# id column range; requests outside it are rejected before reaching the store
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class Product(Base):
    __tablename__ = "products"

    # plain INTEGER on SQLite so it stays the autoincrementing rowid
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    name = Column(String(255))
    quantity = Column(Integer)
    price = Column(Numeric(12, 2))

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, quantity={self.quantity!r}, price={self.price!r})"
