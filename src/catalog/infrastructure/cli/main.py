import click
import uvicorn

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.config import settings


@click.group()
def cli() -> None:
    """Product Catalog: HTTP CRUD service for products"""


@cli.command()
@click.option("--host", default=settings.host, show_default=True, help="Bind address.")
@click.option("--port", default=settings.port, show_default=True, type=int, help="Bind port.")
def serve(host: str, port: int) -> None:
    """Run the HTTP API with uvicorn."""
    uvicorn.run(
        "catalog.infrastructure.api.app:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
