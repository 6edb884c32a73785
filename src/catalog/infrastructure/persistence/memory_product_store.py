"""In-memory implementation of ProductStore.

``InMemoryDatabase`` is the process-wide table shared by every
request. ``InMemoryProductStore`` is a per-request unit of work over
it: changes are staged and only reach the table on commit.
"""

from __future__ import annotations

import itertools

from catalog.domain.model.product import Product
from catalog.domain.repository.product_store import ProductStore


class InMemoryDatabase:
    """Products keyed by id, with ids handed out from 1 upwards."""

    def __init__(self) -> None:
        self.rows: dict[int, Product] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)


class InMemoryProductStore(ProductStore):

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database
        self._pending: list[tuple[str, Product]] = []

    # --- ProductStore interface -----------------------------------------------

    async def get_by_id(self, product_id: int) -> Product | None:
        row = self._db.rows.get(product_id)
        return row.copy() if row is not None else None

    async def list_all(self) -> list[Product]:
        return [row.copy() for row in self._db.rows.values()]

    def add(self, product: Product) -> None:
        self._pending.append(("add", product))

    def update(self, product: Product) -> None:
        self._pending.append(("update", product))

    def remove(self, product: Product) -> None:
        self._pending.append(("remove", product))

    async def commit(self) -> None:
        # No await between the first and last change: commits are atomic.
        pending, self._pending = self._pending, []
        rows = self._db.rows
        for op, product in pending:
            if op == "add":
                product.id = self._db.next_id()
                rows[product.id] = product.copy()
            elif op == "update":
                if product.id in rows:
                    rows[product.id].overwrite_with(product)
            else:
                rows.pop(product.id, None)

    def rollback(self) -> None:
        self._pending = []
