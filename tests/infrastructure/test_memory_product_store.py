"""Tests for the in-memory store and its unit-of-work behaviour."""

from decimal import Decimal

import pytest

from catalog.domain.model.product import Product
from catalog.infrastructure.persistence.memory_product_store import (
    InMemoryDatabase,
    InMemoryProductStore,
)


@pytest.fixture
def database():
    return InMemoryDatabase()


class TestInMemoryProductStore:

    @pytest.mark.asyncio
    async def test_add_assigns_sequential_ids_on_commit(self, database):
        store = InMemoryProductStore(database)
        first = Product(name="Widget", price=Decimal("15"))
        second = Product(name="Gadget", price=Decimal("25"))

        store.add(first)
        store.add(second)
        assert first.id is None  # not yet committed
        await store.commit()

        assert (first.id, second.id) == (1, 2)
        assert [p.name for p in await store.list_all()] == ["Widget", "Gadget"]

    @pytest.mark.asyncio
    async def test_staged_changes_invisible_until_commit(self, database):
        writer = InMemoryProductStore(database)
        reader = InMemoryProductStore(database)

        writer.add(Product(name="Widget", price=Decimal("15")))
        assert await reader.list_all() == []

        await writer.commit()
        assert len(await reader.list_all()) == 1

    @pytest.mark.asyncio
    async def test_rollback_discards_staged_changes(self, database):
        store = InMemoryProductStore(database)
        store.add(Product(name="Widget", price=Decimal("15")))
        store.rollback()
        await store.commit()

        assert await store.list_all() == []

    @pytest.mark.asyncio
    async def test_returned_products_are_detached(self, database):
        store = InMemoryProductStore(database)
        store.add(Product(name="Widget", price=Decimal("15")))
        await store.commit()

        loaded = await store.get_by_id(1)
        loaded.name = "Mutated"

        assert (await store.get_by_id(1)).name == "Widget"

    @pytest.mark.asyncio
    async def test_update_and_remove(self, database):
        store = InMemoryProductStore(database)
        store.add(Product(name="Widget", price=Decimal("15")))
        store.add(Product(name="Gadget", price=Decimal("25")))
        await store.commit()

        widget = await store.get_by_id(1)
        widget.price = Decimal("20")
        store.update(widget)
        store.remove(await store.get_by_id(2))
        await store.commit()

        assert await store.list_all() == [Product(id=1, name="Widget", price=Decimal("20"))]
        assert await store.get_by_id(2) is None

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, database):
        store = InMemoryProductStore(database)
        store.add(Product(name="Widget", price=Decimal("15")))
        await store.commit()
        store.remove(await store.get_by_id(1))
        await store.commit()

        again = Product(name="Widget", price=Decimal("15"))
        store.add(again)
        await store.commit()

        assert again.id == 2
