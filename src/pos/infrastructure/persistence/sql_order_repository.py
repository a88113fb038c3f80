"""SQLAlchemy implementations of OrderRepository and PaymentRepository."""

from __future__ import annotations

from sqlalchemy.orm import Session

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.billing import BillLine, Quote
from pos.domain.model.order import OrderStatus
from pos.domain.repository.order_repository import OrderRepository
from pos.domain.repository.payment_repository import PaymentRepository
from pos.infrastructure.persistence.models import (
    OrderLineRecord,
    OrderRecord,
    PaymentRecord,
)


class SqlOrderRepository(OrderRepository):

    def save_preview(
        self,
        tx: Session,
        scope: str,
        location: str,
        user_id: int | None,
        bill_serial: int,
        quote: Quote,
    ) -> int:
        record = OrderRecord(
            bill_serial=bill_serial,
            type=scope,
            location=location,
            user_id=user_id,
            total_gross_cents=quote.subtotal.cents,
            discount_cents=quote.discount.cents,
            total_net_cents=quote.total.cents,
            status=OrderStatus.PREVIEW.value,
        )
        tx.add(record)
        tx.flush()
        return record.id

    def save_lines(self, tx: Session, order_id: int, lines: list[BillLine]) -> None:
        tx.add_all(
            OrderLineRecord(
                order_id=order_id,
                product_code=line.product_code.value,
                name=line.product_name,
                unit_price_cents=line.unit_price.cents,
                quantity=line.quantity.value,
                line_total_cents=line.line_total.cents,
            )
            for line in lines
        )
        tx.flush()

    def save_final(self, tx: Session, order_id: int, quote: Quote) -> None:
        record = tx.get(OrderRecord, order_id)
        if record is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        record.status = OrderStatus.FINAL.value
        record.total_gross_cents = quote.subtotal.cents
        record.discount_cents = quote.discount.cents
        record.total_net_cents = quote.total.cents
        tx.flush()


class SqlPaymentRepository(PaymentRepository):

    def save_card(self, tx: Session, order_id: int, last4: str, auth_ref: str) -> None:
        tx.add(
            PaymentRecord(
                order_id=order_id,
                method="CARD",
                card_last4=last4,
                auth_ref=auth_ref,
            )
        )
        tx.flush()
