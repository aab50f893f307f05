# schemas/product.py
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# matches the Numeric(12, 2) price column, so nothing is rounded on save
PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2


class ProductBase(BaseModel):
    name: str
    quantity: int
    price: Decimal = Field(..., max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES)


class ProductIn(ProductBase):
    """Request body. ``id`` is accepted for client convenience and ignored."""

    id: Optional[int] = None


class ProductOut(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)
