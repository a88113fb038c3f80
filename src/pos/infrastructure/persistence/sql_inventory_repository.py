"""SQLAlchemy implementation of the inventory repositories.

``deduct_from_batch`` is a conditional UPDATE: the row is only
decremented while it still holds at least ``amount`` units, so two
transactions can never drive a batch negative. Zero affected rows is
reported as BatchConcurrencyError and not retried.
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from pos.domain.exceptions import BatchConcurrencyError
from pos.domain.model.inventory import Batch, StockLocation
from pos.domain.model.value_objects import Code
from pos.domain.repository.inventory_repository import (
    InventoryAdminRepository,
    InventoryRepository,
)
from pos.infrastructure.persistence.models import BatchRecord


class SqlInventoryRepository(InventoryRepository, InventoryAdminRepository):

    # --- InventoryRepository interface ----------------------------------------

    def find_deduction_candidates(
        self, tx: Session, code: Code, location: StockLocation
    ) -> list[Batch]:
        rows = tx.scalars(
            select(BatchRecord)
            .where(
                BatchRecord.product_code == code.value,
                BatchRecord.location == location.value,
                BatchRecord.quantity > 0,
            )
            .order_by(BatchRecord.id)
            # Refresh rows already loaded before a conditional UPDATE in this session.
            .execution_options(populate_existing=True)
        ).all()
        return [self._to_domain(row) for row in rows]

    def total_available(self, tx: Session, code: Code, location: StockLocation) -> int:
        total = tx.scalar(
            select(func.coalesce(func.sum(BatchRecord.quantity), 0)).where(
                BatchRecord.product_code == code.value,
                BatchRecord.location == location.value,
            )
        )
        return int(total or 0)

    def deduct_from_batch(self, tx: Session, batch_id: int, amount: int) -> None:
        result = tx.execute(
            update(BatchRecord)
            .where(BatchRecord.id == batch_id, BatchRecord.quantity >= amount)
            .values(quantity=BatchRecord.quantity - amount)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise BatchConcurrencyError(batch_id, amount)

    # --- InventoryAdminRepository interface -----------------------------------

    def insert_batch(
        self,
        tx: Session,
        code: Code,
        location: StockLocation,
        received_at: datetime,
        expiry: date | None,
        quantity: int,
    ) -> int:
        record = BatchRecord(
            product_code=code.value,
            location=location.value,
            received_at=received_at,
            expiry=expiry,
            quantity=quantity,
        )
        tx.add(record)
        tx.flush()
        return record.id

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(record: BatchRecord) -> Batch:
        return Batch(
            id=record.id,
            product_code=Code(record.product_code),
            location=StockLocation(record.location),
            received_at=record.received_at,
            expiry=record.expiry,
            quantity=record.quantity,
        )
