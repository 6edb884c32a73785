"""Application service: Product use cases.

Owns the two business rules of the catalog (a product needs a
non-blank name and a non-negative price) and orchestrates every read
and write through a ProductStore. The service keeps no state of its
own; each call reads or writes through the store.

Every operation returns a Result. Validation and not-found failures
come back as ``Err`` before the store is touched; store failures are
rolled back and come back as ``Err(StoreError)``. Cancellation is not
a business outcome and always propagates.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal

from catalog.application.result import Err, Ok, Result
from catalog.domain.exceptions import (
    EntityNotFoundError,
    InvalidValueError,
    MissingRequiredFieldError,
    StoreError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.repository.product_store import ProductStore

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    # --- Queries --------------------------------------------------------------

    async def list_products(self) -> Result[list[Product]]:
        try:
            products = await self._store.list_all()
        except Exception as exc:
            return self._store_fault("list products", exc)
        return Ok(products)

    async def get_product(self, product_id: int) -> Result[Product | None]:
        """Return the product, or ``Ok(None)`` when no record has that id."""
        try:
            product = await self._store.get_by_id(product_id)
        except Exception as exc:
            return self._store_fault(f"get product {product_id}", exc)
        return Ok(product)

    # --- Commands -------------------------------------------------------------

    async def create_product(self, candidate: Product) -> Result[int]:
        """Validate and persist a new product, returning its assigned id.

        Any id on the candidate is ignored.
        """
        error = _validate(candidate)
        if error is not None:
            logger.debug("Rejected new product: %s", error)
            return Err(error)

        product = Product(
            name=candidate.name,
            price=candidate.price,
            description=candidate.description,
        )
        try:
            self._store.add(product)
            await self._commit()
        except Exception as exc:
            return self._store_fault("create product", exc)

        logger.info("Created product #%s %r", product.id, product.name)
        return Ok(product.id)

    async def update_product(self, product_id: int, candidate: Product) -> Result[Product]:
        """Overwrite name, price and description of an existing product."""
        try:
            product = await self._store.get_by_id(product_id)
        except Exception as exc:
            return self._store_fault(f"load product {product_id}", exc)

        if product is None:
            logger.debug("Rejected update of unknown product #%s", product_id)
            return Err(EntityNotFoundError(product_id))

        error = _validate(candidate)
        if error is not None:
            logger.debug("Rejected update of product #%s: %s", product_id, error)
            return Err(error)

        product.overwrite_with(candidate)
        try:
            self._store.update(product)
            await self._commit()
        except Exception as exc:
            return self._store_fault(f"update product {product_id}", exc)

        logger.info("Updated product #%s", product_id)
        return Ok(product)

    async def delete_product(self, product_id: int) -> Result[None]:
        try:
            product = await self._store.get_by_id(product_id)
        except Exception as exc:
            return self._store_fault(f"load product {product_id}", exc)

        if product is None:
            logger.debug("Rejected delete of unknown product #%s", product_id)
            return Err(EntityNotFoundError(product_id))

        try:
            self._store.remove(product)
            await self._commit()
        except Exception as exc:
            return self._store_fault(f"delete product {product_id}", exc)

        logger.info("Deleted product #%s", product_id)
        return Ok(None)

    # --- Internal helpers -----------------------------------------------------

    async def _commit(self) -> None:
        try:
            await self._store.commit()
        except asyncio.CancelledError:
            self._store.rollback()
            raise

    def _store_fault(self, action: str, exc: Exception) -> Err:
        self._store.rollback()
        logger.exception("Store failure during %s", action)
        return Err(StoreError(f"Could not {action}: {exc}"))


def _validate(candidate: Product) -> ValidationError | None:
    """Apply the name rule, then the price rule; return the first failure."""
    name = candidate.name
    if name is None or not name.strip():
        shown = "" if name is None else name
        return MissingRequiredFieldError(
            f"Name cannot be null or empty: {shown}", field="name"
        )
    if candidate.price is None:
        return MissingRequiredFieldError("Price is required", field="price")
    if not candidate.price.is_finite():
        return InvalidValueError(
            f"Price must be a finite number. Price: {candidate.price}", field="price"
        )
    if candidate.price < Decimal("0"):
        return InvalidValueError(
            f"Price cannot be less than 0. Price: {candidate.price}", field="price"
        )
    return None
