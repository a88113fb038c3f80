"""Application service: Transfer Stock use case.

Moves units of a product between two stock locations: FIFO deduction at
the source and one fresh batch at the destination, in one transaction.
The destination batch does not inherit any expiry from the source
batches.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

import structlog

from pos.domain.exceptions import (
    InsufficientStockAtLocationError,
    TransferOperationError,
    ValidationError,
)
from pos.domain.model.inventory import StockLocation
from pos.domain.model.value_objects import Code
from pos.domain.policies.batch_strategy import BatchSelectionStrategy
from pos.domain.repository.inventory_repository import (
    InventoryAdminRepository,
    InventoryRepository,
)
from pos.domain.transaction import TransactionRunner

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransferStockUseCase:

    def __init__(
        self,
        tx_runner: TransactionRunner,
        inventory_repo: InventoryRepository,
        inventory_admin_repo: InventoryAdminRepository,
        batch_strategy: BatchSelectionStrategy,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._tx_runner = tx_runner
        self._inventory_repo = inventory_repo
        self._inventory_admin_repo = inventory_admin_repo
        self._batch_strategy = batch_strategy
        self._clock = clock

    def transfer(
        self,
        product_code: str | None,
        from_location: StockLocation | None,
        to_location: StockLocation | None,
        quantity: int,
    ) -> int:
        """Move ``quantity`` units and return the id of the new destination batch."""
        if product_code is None or not product_code.strip():
            raise ValidationError("Product code cannot be empty")
        if quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got: {quantity}")
        if from_location is None:
            raise ValidationError("Source location cannot be null")
        if to_location is None:
            raise ValidationError("Destination location cannot be null")
        if from_location is to_location:
            raise ValidationError("Source and destination locations cannot be the same")

        code = Code(product_code)

        def work(tx: Any) -> int:
            available = self._inventory_repo.total_available(tx, code, from_location)
            if available < quantity:
                raise InsufficientStockAtLocationError(
                    code.value, from_location.value, available, quantity
                )

            try:
                self._batch_strategy.deduct(tx, code, quantity, from_location)
                return self._inventory_admin_repo.insert_batch(
                    tx,
                    code,
                    to_location,
                    received_at=self._clock(),
                    expiry=None,
                    quantity=quantity,
                )
            except Exception as exc:
                raise TransferOperationError(
                    f"Transfer operation failed: {exc}"
                ) from exc

        batch_id = self._tx_runner.run(work)
        logger.info(
            "Stock transferred",
            product_code=code.value,
            from_location=from_location.value,
            to_location=to_location.value,
            quantity=quantity,
            batch_id=batch_id,
        )
        return batch_id
