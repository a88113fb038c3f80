"""SQLAlchemy implementation of CartRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from pos.domain.model.cart import CartItem
from pos.domain.repository.cart_repository import CartRepository
from pos.infrastructure.persistence.models import CartItemRecord, CartRecord


class SqlCartRepository(CartRepository):

    def get_or_create_cart(self, tx: Session, user_id: int) -> int:
        cart_id = tx.scalar(select(CartRecord.id).where(CartRecord.user_id == user_id))
        if cart_id is not None:
            return cart_id
        record = CartRecord(user_id=user_id)
        tx.add(record)
        tx.flush()
        return record.id

    def upsert_item(self, tx: Session, cart_id: int, product_code: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(tx, cart_id, product_code)
            return
        record = tx.scalars(
            select(CartItemRecord).where(
                CartItemRecord.cart_id == cart_id,
                CartItemRecord.product_code == product_code,
            )
        ).one_or_none()
        if record is None:
            tx.add(CartItemRecord(cart_id=cart_id, product_code=product_code, quantity=quantity))
        else:
            record.quantity = quantity
        tx.flush()

    def remove_item(self, tx: Session, cart_id: int, product_code: str) -> None:
        tx.execute(
            delete(CartItemRecord).where(
                CartItemRecord.cart_id == cart_id,
                CartItemRecord.product_code == product_code,
            )
        )

    def items(self, tx: Session, cart_id: int) -> list[CartItem]:
        rows = tx.scalars(
            select(CartItemRecord)
            .where(CartItemRecord.cart_id == cart_id)
            .order_by(CartItemRecord.id)
        ).all()
        return [CartItem(product_code=row.product_code, quantity=row.quantity) for row in rows]

    def clear_cart(self, tx: Session, cart_id: int) -> None:
        tx.execute(delete(CartItemRecord).where(CartItemRecord.cart_id == cart_id))
