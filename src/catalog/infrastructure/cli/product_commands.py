"""CLI commands for the Product entity."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from decimal import Decimal, InvalidOperation

import click

from catalog.application.product_service import ProductService
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import product_service, product_store_factory
from catalog.infrastructure.config import settings


def _service() -> ProductService:
    """Build a service over a store that outlives this process.

    An in-memory catalog would vanish when the command exits, so the
    CLI falls back to the JSON store at ``product_data_file``.
    """
    cli_settings = settings
    if settings.product_store.strip().lower() == "memory":
        cli_settings = replace(settings, product_store="json")
    return product_service(product_store_factory(cli_settings)())


def _run(operation):
    """Run one service call and unwrap its Result for click."""
    result = asyncio.run(operation)
    try:
        return result.unwrap()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _parse_price(raw: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{raw}'.", param_hint="--price")


def _format_price(price: Decimal) -> str:
    return f"{price:.2f}"


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = _run(_service().list_products())

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Description")
    click.echo("-" * 52)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {_format_price(p.price):>10}  {p.description or ''}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    product = _run(_service().get_product(product_id))
    if product is None:
        raise click.ClickException(f"No entity for id {product_id}")

    click.echo(f"Product #{product.id}")
    click.echo(f"Name:        {product.name}")
    click.echo(f"Price:       {_format_price(product.price)}")
    click.echo(f"Description: {product.description or '-'}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default=None, help="Optional description.")
def product_add(name: str, price: str, description: str | None) -> None:
    """Add a new product to the catalog."""
    candidate = Product(name=name, price=_parse_price(price), description=description)
    product_id = _run(_service().create_product(candidate))
    click.echo(f"Product #{product_id} '{name}' added at {_format_price(candidate.price)}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--description", default=None, help="New description (cleared if omitted).")
def product_update(
    product_id: int, name: str, price: str, description: str | None
) -> None:
    """Overwrite a product's name, price and description."""
    candidate = Product(name=name, price=_parse_price(price), description=description)
    product = _run(_service().update_product(product_id, candidate))
    click.echo(f"Product #{product.id} updated: '{product.name}' at {_format_price(product.price)}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    _run(_service().delete_product(product_id))
    click.echo(f"Product #{product_id} deleted")
