"""SQLAlchemy table mappings.

Money columns hold integer cents. Batches are never deleted: a depleted
batch stays with quantity 0.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class ProductRecord(Base):
    __tablename__ = "products"

    code = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    price_cents = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<ProductRecord code={self.code!r} name={self.name!r}>"


class BatchRecord(Base):
    __tablename__ = "batches"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_batches_quantity_non_negative"),
        Index("ix_batches_product_location", "product_code", "location"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_code = Column(String(64), ForeignKey("products.code"), nullable=False)
    location = Column(String(16), nullable=False)
    received_at = Column(DateTime(timezone=True), nullable=False)
    expiry = Column(Date, nullable=True)
    quantity = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<BatchRecord id={self.id} product_code={self.product_code!r} "
            f"location={self.location} quantity={self.quantity}>"
        )


class BillNumberRecord(Base):
    """Per-scope serial sequence ("COUNTER", "ONLINE")."""

    __tablename__ = "bill_numbers"

    scope = Column(String(32), primary_key=True)
    next_val = Column(Integer, nullable=False, default=1)


class BillRecord(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    serial = Column(String(32), nullable=False, unique=True)
    subtotal_cents = Column(Integer, nullable=False)
    discount_cents = Column(Integer, nullable=False)
    total_cents = Column(Integer, nullable=False)
    cash_cents = Column(Integer, nullable=False)
    change_cents = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    lines = relationship("BillLineRecord", back_populates="bill", cascade="all, delete-orphan")


class BillLineRecord(Base):
    __tablename__ = "bill_lines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bill_id = Column(Integer, ForeignKey("bills.id"), nullable=False, index=True)
    product_code = Column(String(64), nullable=False)
    product_name = Column(String(255), nullable=False)
    unit_price_cents = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    line_total_cents = Column(Integer, nullable=False)

    bill = relationship("BillRecord", back_populates="lines")


class OrderRecord(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bill_serial = Column(Integer, nullable=False)
    type = Column(String(32), nullable=False)
    location = Column(String(16), nullable=False)
    user_id = Column(Integer, nullable=True, index=True)
    total_gross_cents = Column(Integer, nullable=False)
    discount_cents = Column(Integer, nullable=False)
    total_net_cents = Column(Integer, nullable=False)
    status = Column(String(16), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class OrderLineRecord(Base):
    __tablename__ = "order_lines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_code = Column(String(64), nullable=False)
    name = Column(String(255), nullable=False)
    unit_price_cents = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    line_total_cents = Column(Integer, nullable=False)


class PaymentRecord(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    method = Column(String(16), nullable=False)
    card_last4 = Column(String(4), nullable=True)
    auth_ref = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class CartRecord(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, unique=True)


class CartItemRecord(Base):
    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("cart_id", "product_code", name="uq_cart_items_cart_product"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    cart_id = Column(Integer, ForeignKey("carts.id"), nullable=False, index=True)
    product_code = Column(String(64), nullable=False)
    quantity = Column(Integer, nullable=False)


class ShortageEventRecord(Base):
    __tablename__ = "shortage_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


def create_schema(engine: Engine) -> None:
    Base.metadata.create_all(engine)
