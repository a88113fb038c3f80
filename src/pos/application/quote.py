"""Application service: Quote use case.

Prices a list of cart lines against the current catalog and a discount
policy. Checkout reuses the same pricing inside its own transaction.
"""

from __future__ import annotations

from typing import Any, Iterable

from pos.application.dto import LineItemSpec
from pos.domain.exceptions import DiscountExceedsSubtotalError, UnknownProductError
from pos.domain.model.billing import BillLine, Quote, subtotal_of
from pos.domain.model.value_objects import Code, Quantity
from pos.domain.pricing.discount_policy import DiscountPolicy
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.transaction import TransactionRunner


class QuoteUseCase:

    def __init__(
        self,
        tx_runner: TransactionRunner,
        product_repo: ProductRepository,
    ) -> None:
        self._tx_runner = tx_runner
        self._product_repo = product_repo

    def product_exists(self, code: str | None) -> bool:
        if code is None or not code.strip():
            return False
        return self._tx_runner.run(
            lambda tx: self._product_repo.find_by_code(tx, Code(code)) is not None
        )

    def quote(
        self,
        items: Iterable[LineItemSpec],
        discount_policy: DiscountPolicy,
        tx: Any = None,
    ) -> Quote:
        """Price ``items`` and apply the discount policy.

        Runs in ``tx`` when given (checkout), otherwise in its own
        read transaction.
        """
        items = list(items)
        if tx is None:
            return self._tx_runner.run(lambda own_tx: self._quote(own_tx, items, discount_policy))
        return self._quote(tx, items, discount_policy)

    def preview(
        self, cart_items: Iterable[LineItemSpec], discount_policy: DiscountPolicy
    ) -> Quote:
        """Quote a counter cart before the cashier takes payment."""
        return self.quote(cart_items, discount_policy)

    def price_lines(self, tx: Any, items: Iterable[LineItemSpec]) -> list[BillLine]:
        """Resolve each item to its product and snapshot name and price."""
        lines: list[BillLine] = []
        for item in items:
            product = self._product_repo.find_by_code(tx, Code(item.product_code))
            if product is None:
                raise UnknownProductError(item.product_code)
            lines.append(
                BillLine(
                    product_code=product.code,
                    product_name=product.name,
                    quantity=Quantity(item.quantity),
                    unit_price=product.price,  # <-- price snapshot
                )
            )
        return lines

    # --- Internal helpers -----------------------------------------------------

    def _quote(
        self, tx: Any, items: list[LineItemSpec], discount_policy: DiscountPolicy
    ) -> Quote:
        lines = self.price_lines(tx, items)
        subtotal = subtotal_of(lines)
        discount = discount_policy.discount_for(lines)
        if discount > subtotal:
            raise DiscountExceedsSubtotalError(
                f"Discount {discount} exceeds subtotal {subtotal}"
            )
        return Quote(
            lines=lines,
            subtotal=subtotal,
            discount=discount,
            total=subtotal - discount,
        )
