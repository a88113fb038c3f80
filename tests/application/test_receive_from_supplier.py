"""Integration tests for receiving supplier deliveries."""

from datetime import date, datetime, timezone

import pytest

from pos.application.receive_from_supplier import ReceiveFromSupplierUseCase
from pos.domain.exceptions import UnknownProductError, ValidationError
from pos.domain.model.inventory import StockLocation
from tests.fakes import (
    FakeInventoryRepository,
    FakeProductRepository,
    FakeTransactionRunner,
    InMemoryDatabase,
    seed_product,
    total_at,
)

NOW = datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc)


def _setup() -> tuple[ReceiveFromSupplierUseCase, InMemoryDatabase]:
    db = InMemoryDatabase()
    seed_product(db, "PROD001", "Widget", "10.00")
    use_case = ReceiveFromSupplierUseCase(
        tx_runner=FakeTransactionRunner(db),
        product_repo=FakeProductRepository(db),
        inventory_admin_repo=FakeInventoryRepository(db),
        clock=lambda: NOW,
    )
    return use_case, db


class TestReceive:

    def test_batch_lands_in_main_store(self):
        use_case, db = _setup()
        batch_id = use_case.receive("PROD001", 100, date(2025, 9, 1))
        batch = db.batches[batch_id]
        assert batch.location is StockLocation.MAIN_STORE
        assert batch.quantity == 100
        assert batch.expiry == date(2025, 9, 1)
        assert batch.received_at == NOW

    def test_each_delivery_is_its_own_batch(self):
        use_case, db = _setup()
        first = use_case.receive("PROD001", 10)
        second = use_case.receive("PROD001", 15)
        assert first != second
        assert total_at(db, "PROD001", StockLocation.MAIN_STORE) == 25

    def test_unknown_product(self):
        use_case, db = _setup()
        with pytest.raises(UnknownProductError):
            use_case.receive("PROD999", 10)
        assert db.batches == {}

    def test_non_positive_quantity(self):
        use_case, _ = _setup()
        with pytest.raises(ValidationError, match="Quantity must be positive"):
            use_case.receive("PROD001", 0)
