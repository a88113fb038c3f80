"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy.orm import Session

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Code, Money
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.persistence.models import ProductRecord


class SqlProductRepository(ProductRepository):

    def find_by_code(self, tx: Session, code: Code) -> Product | None:
        record = tx.get(ProductRecord, code.value)
        if record is None:
            return None
        return self._to_domain(record)

    def save(self, tx: Session, product: Product) -> None:
        record = tx.get(ProductRecord, product.code.value)
        if record is None:
            record = ProductRecord(code=product.code.value)
            tx.add(record)
        record.name = product.name
        record.price_cents = product.price.cents
        tx.flush()

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            code=Code(record.code),
            name=record.name,
            price=Money(record.price_cents),
        )
