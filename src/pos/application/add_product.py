"""Application service: Add Product use case.

Minimal catalog seeding; full product management lives outside this core.
"""

from __future__ import annotations

from typing import Any

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Code, Money
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.transaction import TransactionRunner


class AddProductHandler:

    def __init__(self, tx_runner: TransactionRunner, product_repo: ProductRepository) -> None:
        self._tx_runner = tx_runner
        self._product_repo = product_repo

    def handle(self, code: str, name: str, price: str) -> Product:
        """Add a new product to the catalog."""
        product = Product(code=Code(code), name=name, price=Money.of(price))
        if product.price.cents <= 0:
            raise ValidationError("Product price must be greater than zero")

        def work(tx: Any) -> Product:
            if self._product_repo.find_by_code(tx, product.code) is not None:
                raise ValidationError(f"Product '{product.code}' already exists")
            self._product_repo.save(tx, product)
            return product

        return self._tx_runner.run(work)
