"""Product entity.

The only entity in the catalog. Validation lives in the service layer,
so a Product can hold a candidate that has not been checked yet.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is None until the store assigns one on commit. Kept as a
    mutable dataclass because updates overwrite fields in place.
    """

    name: str | None
    price: Decimal
    description: str | None = None
    id: int | None = None

    def overwrite_with(self, other: Product) -> None:
        """Copy name, price and description from ``other``; id never changes."""
        self.name = other.name
        self.price = other.price
        self.description = other.description

    def copy(self) -> Product:
        return replace(self)
