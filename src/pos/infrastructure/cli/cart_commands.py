"""CLI commands for web-shop carts."""

from __future__ import annotations

import click

from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import online_cart_use_case


@click.command("add")
@click.option("--user", "user_id", required=True, type=int, help="Web-shop user id.")
@click.option("--product", required=True, help="Product code.")
@click.option("--quantity", required=True, type=int, help="Units wanted.")
def cart_add(user_id: int, product: str, quantity: int) -> None:
    """Put a product in the user's cart."""
    try:
        online_cart_use_case().add_to_cart(user_id, product, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart of user {user_id}: {product.upper()} x {quantity}")


@click.command("remove")
@click.option("--user", "user_id", required=True, type=int, help="Web-shop user id.")
@click.option("--product", required=True, help="Product code.")
def cart_remove(user_id: int, product: str) -> None:
    """Remove a product from the user's cart."""
    try:
        online_cart_use_case().remove_from_cart(user_id, product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {product.upper()} from cart of user {user_id}")


@click.command("show")
@click.option("--user", "user_id", required=True, type=int, help="Web-shop user id.")
def cart_show(user_id: int) -> None:
    """Show the user's cart."""
    try:
        view = online_cart_use_case().view_cart(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not view.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'Code':<10} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo("-" * 59)
    for line in view.lines:
        click.echo(
            f"{line.product_code:<10} {line.product_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo("-" * 59)
    click.echo(f"{'Subtotal':<47} {view.subtotal:>11}")
