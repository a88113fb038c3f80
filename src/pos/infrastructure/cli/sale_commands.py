"""CLI commands for checkout."""

from __future__ import annotations

import click

from pos.application.dto import LineItemSpec
from pos.domain.exceptions import DomainException
from pos.domain.model.card import CardDetails
from pos.domain.model.inventory import StockLocation
from pos.domain.model.value_objects import Money
from pos.domain.pricing.discount_policy import DiscountPolicy, NoDiscount, PercentDiscount
from pos.infrastructure.bootstrap import checkout_use_case


def _parse_items(raw: str) -> list[LineItemSpec]:
    """Parse 'PROD001:3,PROD002:5' into LineItemSpec list."""
    specs: list[LineItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Code:Quantity'."
            )
        code, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{code}'."
            )
        specs.append(LineItemSpec(product_code=code.strip(), quantity=qty))
    return specs


def _discount_policy(percent: int) -> DiscountPolicy:
    return PercentDiscount(percent) if percent else NoDiscount()


@click.command("cash")
@click.option("--items", required=True, help="Items as 'Code:Qty,Code:Qty'.")
@click.option("--cash", required=True, help="Cash tendered (e.g. 50.00).")
@click.option(
    "--location",
    default=StockLocation.SHELF.value,
    show_default=True,
    type=click.Choice([loc.value for loc in StockLocation], case_sensitive=False),
    help="Location to sell from.",
)
@click.option("--discount-percent", default=0, type=int, help="Percent off the subtotal.")
def sale_cash(items: str, cash: str, location: str, discount_percent: int) -> None:
    """Counter sale paid in cash."""
    specs = _parse_items(items)
    use_case = checkout_use_case()

    try:
        bill = use_case.checkout_cash(
            specs,
            Money.of(cash),
            StockLocation.parse(location),
            _discount_policy(discount_percent),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bill {bill.serial}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in bill.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity.value:>5} "
            f"{str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {str(bill.subtotal):>20}")
    click.echo(f"  {'Discount':<27} {str(bill.discount):>20}")
    click.echo(f"  {'Total':<27} {str(bill.total):>20}")
    click.echo(f"  {'Cash':<27} {str(bill.cash):>20}")
    click.echo(f"  {'Change':<27} {str(bill.change):>20}")


@click.command("card")
@click.option("--user", "user_id", required=True, type=int, help="Web-shop user id.")
@click.option("--card-number", required=True, help="16-digit card number.")
@click.option("--exp-month", required=True, type=int, help="Expiry month (1-12).")
@click.option("--exp-year", required=True, type=int, help="Expiry year (e.g. 2028).")
@click.option("--cvv", required=True, help="3-digit security code.")
@click.option("--discount-percent", default=0, type=int, help="Percent off the subtotal.")
def sale_card(
    user_id: int,
    card_number: str,
    exp_month: int,
    exp_year: int,
    cvv: str,
    discount_percent: int,
) -> None:
    """Check out a user's web cart, paid by card."""
    use_case = checkout_use_case()
    card = CardDetails(number=card_number, exp_month=exp_month, exp_year=exp_year, cvv=cvv)

    try:
        result = use_case.checkout_card(user_id, _discount_policy(discount_percent), card)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {result.formatted_order_id} (#{result.order_id}, serial {result.bill_serial})")
    click.echo(f"Total charged: {result.quote.total} to card ending {card.last4}")
