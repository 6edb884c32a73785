"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from catalog.application.product_service import ProductService
from catalog.domain.repository.product_store import ProductStore
from catalog.infrastructure.config import ConfigurationError, Settings
from catalog.infrastructure.persistence.json_product_store import JsonProductStore
from catalog.infrastructure.persistence.memory_product_store import (
    InMemoryDatabase,
    InMemoryProductStore,
)

StoreFactory = Callable[[], ProductStore]


def product_store_factory(settings: Settings) -> StoreFactory:
    """Return a callable producing one store (unit of work) per call.

    The in-memory database is created here, so every store from the
    same factory shares it.
    """
    backend = settings.product_store.strip().lower()
    if backend == "memory":
        database = InMemoryDatabase()
        return lambda: InMemoryProductStore(database)
    if backend == "json":
        path = Path(settings.product_data_file)
        return lambda: JsonProductStore(path)
    raise ConfigurationError(
        f"Unknown PRODUCT_STORE '{settings.product_store}'. Expected 'memory' or 'json'."
    )


def product_service(store: ProductStore) -> ProductService:
    return ProductService(store)
