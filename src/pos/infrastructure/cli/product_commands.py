"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import add_product_handler


@click.command("add")
@click.option("--code", required=True, help="Product code.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
def product_add(code: str, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = add_product_handler()

    try:
        product = handler.handle(code=code, name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.code} '{product.name}' added at {product.price}")
