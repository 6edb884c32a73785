"""JSON-file-backed implementation of ProductStore."""

from __future__ import annotations

import asyncio
import json
import threading
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Product
from catalog.domain.repository.product_store import ProductStore

# Commits read, modify and rewrite the whole file.
_FILE_LOCK = threading.Lock()


class JsonProductStore(ProductStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._pending: list[tuple[str, Product]] = []
        self._ensure_file()

    # --- ProductStore interface -----------------------------------------------

    async def get_by_id(self, product_id: int) -> Product | None:
        products = await asyncio.to_thread(self._load)
        return products.get(product_id)

    async def list_all(self) -> list[Product]:
        products = await asyncio.to_thread(self._load)
        return list(products.values())

    def add(self, product: Product) -> None:
        self._pending.append(("add", product))

    def update(self, product: Product) -> None:
        self._pending.append(("update", product))

    def remove(self, product: Product) -> None:
        self._pending.append(("remove", product))

    async def commit(self) -> None:
        """Write staged changes to disk in a worker thread.

        Cancelling the caller while the write is in flight does not stop
        the thread: the file is still updated. Only changes that never
        reached ``commit`` are guaranteed to be discarded.
        """
        pending, self._pending = self._pending, []
        if pending:
            await asyncio.to_thread(self._apply, pending)

    def rollback(self) -> None:
        self._pending = []

    # --- Serialization helpers ------------------------------------------------

    def _apply(self, pending: list[tuple[str, Product]]) -> None:
        with _FILE_LOCK:
            products = self._load()
            for op, product in pending:
                if op == "add":
                    product.id = max(products, default=0) + 1
                    products[product.id] = product.copy()
                elif op == "update":
                    if product.id in products:
                        products[product.id].overwrite_with(product)
                else:
                    products.pop(product.id, None)
            self._persist(products)

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Decimal(item["price"]),
                description=item.get("description"),
            )
            for item in raw
        }

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price),
                "description": p.description,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
