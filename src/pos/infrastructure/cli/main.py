import click

from pos.infrastructure.bootstrap import init_db
from pos.infrastructure.cli.cart_commands import cart_add, cart_remove, cart_show
from pos.infrastructure.cli.product_commands import product_add
from pos.infrastructure.cli.sale_commands import sale_card, sale_cash
from pos.infrastructure.cli.stock_commands import stock_receive, stock_show, stock_transfer
from pos.infrastructure.config import load_settings
from pos.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """POS — point-of-sale inventory and checkout"""
    configure_logging(load_settings().log_level)


@cli.command("init-db")
def init_db_command() -> None:
    """Create database tables."""
    init_db()
    click.echo("Database initialised.")


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Receive, move and inspect stock."""


@cli.group()
def sale() -> None:
    """Check out sales."""


@cli.group()
def cart() -> None:
    """Manage web-shop carts."""


# Register subcommands
product.add_command(product_add)
stock.add_command(stock_receive)
stock.add_command(stock_show)
stock.add_command(stock_transfer)
sale.add_command(sale_card)
sale.add_command(sale_cash)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
