"""Unit tests for the Product entity."""

from decimal import Decimal

from catalog.domain.model.product import Product


class TestProduct:

    def test_new_product_has_no_id(self):
        p = Product(name="Widget", price=Decimal("15.00"))
        assert p.id is None  # assigned by the store
        assert p.description is None

    def test_overwrite_with_copies_fields_but_keeps_id(self):
        existing = Product(id=1, name="Original", price=Decimal("100"), description="old")
        incoming = Product(id=99, name="Updated", price=Decimal("150"), description=None)

        existing.overwrite_with(incoming)

        assert existing == Product(id=1, name="Updated", price=Decimal("150"), description=None)

    def test_copy_is_detached(self):
        original = Product(id=1, name="Widget", price=Decimal("10"))
        clone = original.copy()
        clone.name = "Changed"

        assert clone == Product(id=1, name="Changed", price=Decimal("10"))
        assert original.name == "Widget"
