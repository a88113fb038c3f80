"""Integration tests for the online cart."""

import pytest

from pos.application.online_cart import OnlineCartUseCase
from pos.domain.exceptions import UnknownProductError, ValidationError
from tests.fakes import (
    FakeCartRepository,
    FakeProductRepository,
    FakeTransactionRunner,
    InMemoryDatabase,
    seed_product,
)

USER = 42


def _setup() -> tuple[OnlineCartUseCase, InMemoryDatabase]:
    db = InMemoryDatabase()
    seed_product(db, "PROD001", "Widget", "10.00")
    seed_product(db, "PROD002", "Gadget", "20.00")
    use_case = OnlineCartUseCase(
        tx_runner=FakeTransactionRunner(db),
        cart_repo=FakeCartRepository(db),
        product_repo=FakeProductRepository(db),
    )
    return use_case, db


class TestAddToCart:

    def test_adds_item(self):
        use_case, db = _setup()
        use_case.add_to_cart(USER, "prod001", 2)
        assert db.cart_items[db.carts[USER]] == {"PROD001": 2}

    def test_replaces_quantity(self):
        use_case, db = _setup()
        use_case.add_to_cart(USER, "PROD001", 2)
        use_case.add_to_cart(USER, "PROD001", 5)
        assert db.cart_items[db.carts[USER]] == {"PROD001": 5}

    def test_one_cart_per_user(self):
        use_case, db = _setup()
        use_case.add_to_cart(USER, "PROD001", 1)
        use_case.add_to_cart(USER + 1, "PROD001", 1)
        assert db.carts[USER] != db.carts[USER + 1]

    def test_zero_quantity_rejected(self):
        use_case, _ = _setup()
        with pytest.raises(ValidationError, match="Quantity must be greater than 0"):
            use_case.add_to_cart(USER, "PROD001", 0)

    def test_unknown_product_rejected(self):
        use_case, db = _setup()
        with pytest.raises(UnknownProductError):
            use_case.add_to_cart(USER, "PROD999", 1)
        assert db.carts == {}


class TestRemoveFromCart:

    def test_removes_item(self):
        use_case, db = _setup()
        use_case.add_to_cart(USER, "PROD001", 1)
        use_case.add_to_cart(USER, "PROD002", 1)
        use_case.remove_from_cart(USER, "PROD001")
        assert db.cart_items[db.carts[USER]] == {"PROD002": 1}

    def test_removing_missing_item_is_a_no_op(self):
        use_case, db = _setup()
        use_case.remove_from_cart(USER, "PROD001")
        assert db.cart_items[db.carts[USER]] == {}


class TestViewCart:

    def test_lines_and_subtotal(self):
        use_case, _ = _setup()
        use_case.add_to_cart(USER, "PROD001", 2)
        use_case.add_to_cart(USER, "PROD002", 1)
        view = use_case.view_cart(USER)
        assert view.subtotal == "$40.00"
        assert [(line.product_code, line.quantity, line.line_total) for line in view.lines] == [
            ("PROD001", 2, "$20.00"),
            ("PROD002", 1, "$20.00"),
        ]
        assert view.lines[0].unit_price == "$10.00"

    def test_empty_cart(self):
        use_case, _ = _setup()
        view = use_case.view_cart(USER)
        assert view.lines == []
        assert view.subtotal == "$0.00"
