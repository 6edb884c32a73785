"""Pydantic schemas for the HTTP boundary.

Request bodies deliberately accept a null or blank ``name`` and a
negative ``price``: those rules belong to ProductService, which
reports them with its own messages.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_serializer

from catalog.domain.model.product import Product


class ProductWrite(BaseModel):
    """Body of POST and PUT requests. Any ``id`` sent is ignored."""

    id: int | None = None
    name: str | None = None
    price: Decimal
    description: str | None = None

    def to_product(self) -> Product:
        return Product(name=self.name, price=self.price, description=self.description)


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: Decimal
    description: str | None = None

    # Prices go out as JSON numbers; beyond ~15 significant digits the
    # float conversion rounds. Stored values keep full Decimal precision.
    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ErrorBody(BaseModel):
    error: str
