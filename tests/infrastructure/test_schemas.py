"""Tests for the HTTP request and response schemas."""

from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.infrastructure.api.schemas import ProductRead, ProductWrite


def test_price_is_rendered_as_a_json_number():
    body = ProductRead.model_validate(
        Product(id=1, name="Laptop", price=Decimal("999.99"))
    ).model_dump(mode="json")

    assert body == {"id": 1, "name": "Laptop", "price": 999.99, "description": None}


def test_long_prices_are_rounded_to_float_precision():
    price = Decimal("12345678901234567.89")
    body = ProductRead(id=1, name="Yacht", price=price).model_dump(mode="json")

    assert body["price"] == float(price)


def test_write_schema_drops_client_id():
    product = ProductWrite(id=99, name="Mouse", price=Decimal("29.99")).to_product()
    assert product == Product(name="Mouse", price=Decimal("29.99"), description=None)
