"""Abstract store for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON) live in
the infrastructure layer.

A store instance is a unit of work: ``add``, ``update`` and ``remove``
only stage changes, and nothing is visible to other stores until
``commit`` completes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductStore(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Return a detached copy of a product, or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Stage a new product. Its id is assigned on commit."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Stage an overwrite of the stored product with the same id."""

    @abstractmethod
    def remove(self, product: Product) -> None:
        """Stage the deletion of a product."""

    @abstractmethod
    async def commit(self) -> None:
        """Apply all staged changes."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard all staged changes."""
