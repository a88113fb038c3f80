"""SQLAlchemy implementations of BillRepository and SerialRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from pos.domain.model.billing import Bill
from pos.domain.repository.bill_repository import BillRepository, SerialRepository
from pos.infrastructure.persistence.models import (
    BillLineRecord,
    BillNumberRecord,
    BillRecord,
)


class SqlBillRepository(BillRepository):

    def save(self, tx: Session, bill: Bill) -> int:
        record = BillRecord(
            serial=bill.serial,
            subtotal_cents=bill.subtotal.cents,
            discount_cents=bill.discount.cents,
            total_cents=bill.total.cents,
            cash_cents=bill.cash.cents,
            change_cents=bill.change.cents,
            created_at=bill.created_at,
            lines=[
                BillLineRecord(
                    product_code=line.product_code.value,
                    product_name=line.product_name,
                    unit_price_cents=line.unit_price.cents,
                    quantity=line.quantity.value,
                    line_total_cents=line.line_total.cents,
                )
                for line in bill.lines
            ],
        )
        tx.add(record)
        tx.flush()
        bill.id = record.id
        return record.id


class SqlSerialRepository(SerialRepository):

    def next_serial(self, tx: Session, scope: str) -> int:
        # SQLite ignores FOR UPDATE; other databases lock the row.
        record = tx.scalars(
            select(BillNumberRecord)
            .where(BillNumberRecord.scope == scope)
            .with_for_update()
        ).one_or_none()
        if record is None:
            record = BillNumberRecord(scope=scope, next_val=1)
            tx.add(record)
        current = record.next_val
        record.next_val = current + 1
        tx.flush()
        return current
