"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Code, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_from_cents(self):
        m = Money(1050)
        assert m.cents == 1050
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99") == Money(2599)

    def test_of_factory_from_int(self):
        assert Money.of(10) == Money(1000)

    def test_of_factory_from_decimal(self):
        assert Money.of(Decimal("0.10")) == Money(10)

    def test_fractional_cents_rejected(self):
        with pytest.raises(ValidationError, match="fractional cents"):
            Money.of("1.005")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_float_cents_rejected(self):
        with pytest.raises(ValidationError, match="integer number of cents"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_decimal_sums_are_exact(self):
        total = Money.zero()
        for _ in range(10):
            total = total + Money.of("0.10")
        assert total == Money.of("1.00")

    def test_subtraction(self):
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"
        assert str(Money(5)) == "$0.05"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity("3")

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Code ─────────────────────────────────────────────────────────────────────


class TestCode:

    def test_normalizes_case_and_whitespace(self):
        assert Code("  prod001 ").value == "PROD001"

    def test_equality_by_normalized_value(self):
        assert Code("prod001") == Code("PROD001")
        assert hash(Code("prod001")) == hash(Code("PROD001"))

    def test_blank_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            Code("   ")
