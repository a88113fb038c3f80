"""Integration tests for the cash (counter) checkout flow.

Uses in-memory fake repositories — no database.
"""

from datetime import datetime, timezone

import pytest

from pos.application.checkout import format_bill_serial
from pos.application.dto import LineItemSpec
from pos.domain.exceptions import (
    InsufficientCashError,
    InsufficientStockError,
    UnknownProductError,
)
from pos.domain.model.inventory import StockLocation
from pos.domain.model.value_objects import Code, Money
from pos.domain.pricing.discount_policy import FixedAmountDiscount, NoDiscount
from tests.fakes import InMemoryDatabase, build_checkout, seed_batch, seed_product, total_at

SHELF = StockLocation.SHELF
WEB = StockLocation.WEB
RECEIVED = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


def _setup(shelf: int = 100, web: int = 100, **kwargs):
    db = InMemoryDatabase()
    seed_product(db, "PROD001", "Widget", "10.00")
    seed_product(db, "PROD002", "Gadget", "20.00")
    for code in ("PROD001", "PROD002"):
        if shelf:
            seed_batch(db, code, SHELF, shelf, RECEIVED)
        if web:
            seed_batch(db, code, WEB, web, RECEIVED)
    use_case, runner, publisher, inventory = build_checkout(db, **kwargs)
    return db, use_case, runner, publisher


class TestBillSerial:

    def test_counter_scope(self):
        assert format_bill_serial("COUNTER", 5) == "C-000005"

    def test_online_scope(self):
        assert format_bill_serial("ONLINE", 123) == "O-000123"


class TestCashCheckoutHappyPath:

    def test_totals_discount_and_change(self):
        _, use_case, _, _ = _setup()
        bill = use_case.checkout_cash(
            [LineItemSpec("PROD001", 2), LineItemSpec("PROD002", 1)],
            Money(5000),
            SHELF,
            FixedAmountDiscount(Money.of("2")),
        )
        assert bill.subtotal == Money.of("40.00")
        assert bill.discount == Money.of("2.00")
        assert bill.total == Money.of("38.00")
        assert bill.change == Money.of("12.00")

    def test_lines_snapshot_name_and_price(self):
        _, use_case, _, _ = _setup()
        bill = use_case.checkout_cash(
            [LineItemSpec("prod001", 3)], Money.of("30"), SHELF, NoDiscount()
        )
        line = bill.lines[0]
        assert line.product_code == Code("PROD001")
        assert line.product_name == "Widget"
        assert line.unit_price == Money.of("10.00")
        assert line.quantity.value == 3

    def test_bill_is_persisted_with_id(self):
        db, use_case, runner, _ = _setup()
        bill = use_case.checkout_cash(
            [LineItemSpec("PROD001", 1)], Money.of("10"), SHELF, NoDiscount()
        )
        assert bill.id is not None
        assert db.bills[bill.id].serial == bill.serial
        assert runner.commits == 1

    def test_serials_increase_per_bill(self):
        _, use_case, _, _ = _setup()
        first = use_case.checkout_cash(
            [LineItemSpec("PROD001", 1)], Money.of("10"), SHELF, NoDiscount()
        )
        second = use_case.checkout_cash(
            [LineItemSpec("PROD001", 1)], Money.of("10"), SHELF, NoDiscount()
        )
        assert first.serial == "C-000001"
        assert second.serial == "C-000002"

    def test_deducts_from_shelf(self):
        db, use_case, _, _ = _setup()
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 2), LineItemSpec("PROD002", 1)],
            Money.of("50"),
            SHELF,
            NoDiscount(),
        )
        assert total_at(db, "PROD001", SHELF) == 98
        assert total_at(db, "PROD002", SHELF) == 99
        assert total_at(db, "PROD001", WEB) == 100


class TestShelfOverflowToWeb:

    def test_remainder_taken_from_web(self):
        db, use_case, _, _ = _setup(shelf=4, web=10)
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 10)], Money.of("100"), SHELF, NoDiscount()
        )
        assert total_at(db, "PROD001", SHELF) == 0
        assert total_at(db, "PROD001", WEB) == 4

    def test_empty_shelf_takes_everything_from_web(self):
        db, use_case, _, _ = _setup(shelf=0, web=10)
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 3)], Money.of("30"), SHELF, NoDiscount()
        )
        assert total_at(db, "PROD001", WEB) == 7

    def test_shelf_and_web_together_insufficient_rolls_back(self):
        db, use_case, runner, _ = _setup(shelf=4, web=5)
        with pytest.raises(InsufficientStockError) as info:
            use_case.checkout_cash(
                [LineItemSpec("PROD001", 10)], Money.of("100"), SHELF, NoDiscount()
            )
        assert info.value.location == "WEB"
        assert info.value.requested == 6
        assert total_at(db, "PROD001", SHELF) == 4
        assert total_at(db, "PROD001", WEB) == 5
        assert db.bills == {}
        assert db.serials == {}
        assert runner.rollbacks == 1

    def test_later_line_failure_undoes_earlier_lines(self):
        db, use_case, _, _ = _setup(shelf=4, web=0)
        with pytest.raises(InsufficientStockError):
            use_case.checkout_cash(
                [LineItemSpec("PROD001", 1), LineItemSpec("PROD002", 5)],
                Money.of("200"),
                SHELF,
                NoDiscount(),
            )
        assert total_at(db, "PROD001", SHELF) == 4
        assert total_at(db, "PROD002", SHELF) == 4


class TestOtherLocations:

    def test_web_sale_is_strict(self):
        db, use_case, _, _ = _setup(shelf=100, web=2)
        with pytest.raises(InsufficientStockError):
            use_case.checkout_cash(
                [LineItemSpec("PROD001", 3)], Money.of("30"), WEB, NoDiscount()
            )
        assert total_at(db, "PROD001", SHELF) == 100

    def test_web_sale_deducts_web(self):
        db, use_case, _, publisher = _setup(shelf=10, web=10)
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 3)], Money.of("30"), WEB, NoDiscount()
        )
        assert total_at(db, "PROD001", WEB) == 7
        assert total_at(db, "PROD001", SHELF) == 10
        assert publisher.events == []


class TestLowStockEvent:

    def test_published_when_shelf_below_threshold_before_sale(self):
        _, use_case, _, publisher = _setup(shelf=40)
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 1)], Money.of("10"), SHELF, NoDiscount()
        )
        assert len(publisher.events) == 1
        event = publisher.events[0]
        assert event.product_code == Code("PROD001")
        assert event.remaining == 40

    def test_not_published_when_shelf_at_threshold(self):
        _, use_case, _, publisher = _setup(shelf=50)
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 20)], Money.of("200"), SHELF, NoDiscount()
        )
        assert publisher.events == []

    def test_next_sale_sees_reduced_stock(self):
        _, use_case, _, publisher = _setup(shelf=60)
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 20)], Money.of("200"), SHELF, NoDiscount()
        )
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 1)], Money.of("10"), SHELF, NoDiscount()
        )
        assert [e.remaining for e in publisher.events] == [40]

    def test_threshold_is_configurable(self):
        _, use_case, _, publisher = _setup(shelf=40, low_stock_threshold=10)
        use_case.checkout_cash(
            [LineItemSpec("PROD001", 1)], Money.of("10"), SHELF, NoDiscount()
        )
        assert publisher.events == []


class TestCashCheckoutFailures:

    def test_unknown_product_writes_nothing(self):
        db, use_case, _, _ = _setup()
        with pytest.raises(UnknownProductError, match="Unknown product: NOPE"):
            use_case.checkout_cash(
                [LineItemSpec("PROD001", 1), LineItemSpec("NOPE", 1)],
                Money.of("100"),
                SHELF,
                NoDiscount(),
            )
        assert db.bills == {}
        assert total_at(db, "PROD001", SHELF) == 100

    def test_insufficient_cash_leaves_stock_untouched(self):
        db, use_case, _, _ = _setup()
        with pytest.raises(InsufficientCashError):
            use_case.checkout_cash(
                [LineItemSpec("PROD001", 2)], Money.of("19.99"), SHELF, NoDiscount()
            )
        assert total_at(db, "PROD001", SHELF) == 100
        assert db.bills == {}
