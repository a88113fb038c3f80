"""Discount policies: pure functions from priced lines to one discount amount."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.exceptions import ValidationError
from pos.domain.model.billing import BillLine, subtotal_of
from pos.domain.model.value_objects import Money


class DiscountPolicy(ABC):

    @abstractmethod
    def discount_for(self, lines: list[BillLine]) -> Money:
        """Return how much to subtract from the subtotal of these lines."""


class NoDiscount(DiscountPolicy):

    def discount_for(self, lines: list[BillLine]) -> Money:
        return Money.zero()


class PercentDiscount(DiscountPolicy):
    """A percentage of the subtotal, rounded half-up to the cent."""

    def __init__(self, percent: int) -> None:
        if not 0 <= percent <= 100:
            raise ValidationError(f"Percent must be between 0 and 100, got {percent}")
        self.percent = percent

    def discount_for(self, lines: list[BillLine]) -> Money:
        cents = subtotal_of(lines).cents
        return Money((cents * self.percent + 50) // 100)


class FixedAmountDiscount(DiscountPolicy):
    """A flat amount off the bill, whatever the lines."""

    def __init__(self, amount: Money) -> None:
        self.amount = amount

    def discount_for(self, lines: list[BillLine]) -> Money:
        return self.amount
