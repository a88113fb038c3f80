"""Application service: Receive From Supplier use case."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Callable

import structlog

from pos.domain.exceptions import UnknownProductError, ValidationError
from pos.domain.model.inventory import StockLocation
from pos.domain.model.value_objects import Code
from pos.domain.repository.inventory_repository import InventoryAdminRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.transaction import TransactionRunner

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReceiveFromSupplierUseCase:

    def __init__(
        self,
        tx_runner: TransactionRunner,
        product_repo: ProductRepository,
        inventory_admin_repo: InventoryAdminRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._tx_runner = tx_runner
        self._product_repo = product_repo
        self._inventory_admin_repo = inventory_admin_repo
        self._clock = clock

    def receive(self, product_code: str, quantity: int, expiry: date | None = None) -> int:
        """Receive a fresh batch into MAIN_STORE and return its id."""
        if quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got: {quantity}")
        code = Code(product_code)

        def work(tx: Any) -> int:
            if self._product_repo.find_by_code(tx, code) is None:
                raise UnknownProductError(code.value)
            return self._inventory_admin_repo.insert_batch(
                tx,
                code,
                StockLocation.MAIN_STORE,
                received_at=self._clock(),
                expiry=expiry,
                quantity=quantity,
            )

        batch_id = self._tx_runner.run(work)
        logger.info(
            "Batch received",
            product_code=code.value,
            quantity=quantity,
            expiry=expiry.isoformat() if expiry else None,
            batch_id=batch_id,
        )
        return batch_id
