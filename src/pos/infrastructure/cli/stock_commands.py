"""CLI commands for batch inventory."""

from __future__ import annotations

from datetime import datetime

import click

from pos.domain.exceptions import DomainException
from pos.domain.model.inventory import StockLocation
from pos.infrastructure.bootstrap import (
    receive_use_case,
    show_stock_handler,
    transfer_stock_use_case,
)

_LOCATIONS = click.Choice([loc.value for loc in StockLocation], case_sensitive=False)


@click.command("receive")
@click.option("--product", required=True, help="Product code.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.option(
    "--expiry",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Expiry date (YYYY-MM-DD); omit for non-perishables.",
)
def stock_receive(product: str, quantity: int, expiry: datetime | None) -> None:
    """Receive a supplier batch into MAIN_STORE."""
    use_case = receive_use_case()

    try:
        batch_id = use_case.receive(
            product_code=product,
            quantity=quantity,
            expiry=expiry.date() if expiry else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Batch #{batch_id}: {quantity} x {product.upper()} received into MAIN_STORE")


@click.command("transfer")
@click.option("--product", required=True, help="Product code.")
@click.option("--from", "from_location", required=True, type=_LOCATIONS, help="Source location.")
@click.option("--to", "to_location", required=True, type=_LOCATIONS, help="Destination location.")
@click.option("--quantity", required=True, type=int, help="Units to move.")
def stock_transfer(product: str, from_location: str, to_location: str, quantity: int) -> None:
    """Move stock between locations (FIFO at the source)."""
    use_case = transfer_stock_use_case()

    try:
        batch_id = use_case.transfer(
            product,
            StockLocation.parse(from_location),
            StockLocation.parse(to_location),
            quantity,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Moved {quantity} x {product.upper()} from {from_location.upper()} "
        f"to {to_location.upper()} (batch #{batch_id})"
    )


@click.command("show")
@click.option("--product", required=True, help="Product code.")
def stock_show(product: str) -> None:
    """Show available quantity per location."""
    handler = show_stock_handler()

    try:
        levels = handler.handle(product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Location':<12} {'Available':>10}")
    click.echo("-" * 23)
    for level in levels:
        click.echo(f"{level.location:<12} {level.available:>10}")
