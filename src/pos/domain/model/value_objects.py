"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pos.domain.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount held as an integer number of cents.

    All arithmetic happens on the integer so that sums, differences and
    line totals are exact to the cent.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValidationError(
                f"Money must be an integer number of cents, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents} cents"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __sub__(self, other: Money) -> Money:
        result = self.cents - other.cents
        if result < 0:
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor)

    # --- Display --------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """Exact value in major units, e.g. ``Decimal("12.34")``."""
        return Decimal(self.cents).scaleb(-2)

    def __str__(self) -> str:
        return f"${self.cents // 100}.{self.cents % 100:02d}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Build from an amount in major units ("12.34", 12, Decimal("12.34"))."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        cents = value.scaleb(2)
        if cents != cents.to_integral_value():
            raise ValidationError(f"Money amount has fractional cents: {amount!r}")
        return Money(int(cents))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell or move zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Code:
    """Product or category code, trimmed and upper-cased."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Code cannot be empty")
        object.__setattr__(self, "value", self.value.strip().upper())

    def __str__(self) -> str:
        return self.value
