"""Bills — the counter (cash) sale record.

A Bill owns its lines. Lines snapshot the product name and unit price at
sale time so later catalog changes never rewrite history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import (
    DiscountExceedsSubtotalError,
    InsufficientCashError,
    ValidationError,
)
from pos.domain.model.value_objects import Code, Money, Quantity


@dataclass(frozen=True)
class BillLine:
    product_code: Code
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at sale time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


def subtotal_of(lines: list[BillLine]) -> Money:
    result = Money.zero()
    for line in lines:
        result = result + line.line_total
    return result


@dataclass
class Bill:
    """Aggregate root for a cash sale.

    Use ``Bill.create()`` for new bills — it enforces the money rules.
    ``id`` is assigned by the repository on save.
    """

    serial: str
    lines: list[BillLine]
    discount: Money
    cash: Money
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        serial: str,
        lines: list[BillLine],
        discount: Money,
        cash: Money,
    ) -> Bill:
        if not lines:
            raise ValidationError("Bill must contain at least one line")

        subtotal = subtotal_of(lines)
        if discount > subtotal:
            raise DiscountExceedsSubtotalError(
                f"Discount {discount} exceeds subtotal {subtotal}"
            )
        total = subtotal - discount
        if cash < total:
            raise InsufficientCashError(
                f"Cash {cash} is less than total {total}"
            )
        return Bill(serial=serial, lines=list(lines), discount=discount, cash=cash)

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        return subtotal_of(self.lines)

    @property
    def total(self) -> Money:
        return self.subtotal - self.discount

    @property
    def change(self) -> Money:
        return self.cash - self.total


@dataclass(frozen=True)
class Quote:
    """Priced cart: lines, subtotal, discount and total (never negative)."""

    lines: list[BillLine]
    subtotal: Money
    discount: Money
    total: Money
