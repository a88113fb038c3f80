"""Application service: Online Cart use case (add, remove, view)."""

from __future__ import annotations

from typing import Any

from pos.application.dto import CartLineDTO, CartViewDTO
from pos.domain.exceptions import UnknownProductError, ValidationError
from pos.domain.model.value_objects import Code, Money
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.transaction import TransactionRunner


class OnlineCartUseCase:

    def __init__(
        self,
        tx_runner: TransactionRunner,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._tx_runner = tx_runner
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def add_to_cart(self, user_id: int, product_code: str, quantity: int) -> None:
        """Set the cart quantity for a product (replaces any previous quantity)."""
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")
        code = Code(product_code)

        def work(tx: Any) -> None:
            if self._product_repo.find_by_code(tx, code) is None:
                raise UnknownProductError(code.value)
            cart_id = self._cart_repo.get_or_create_cart(tx, user_id)
            self._cart_repo.upsert_item(tx, cart_id, code.value, quantity)

        self._tx_runner.run(work)

    def remove_from_cart(self, user_id: int, product_code: str) -> None:
        code = Code(product_code)

        def work(tx: Any) -> None:
            cart_id = self._cart_repo.get_or_create_cart(tx, user_id)
            self._cart_repo.remove_item(tx, cart_id, code.value)

        self._tx_runner.run(work)

    def view_cart(self, user_id: int) -> CartViewDTO:
        return self._tx_runner.run(lambda tx: self._view(tx, user_id))

    # --- Internal helpers -----------------------------------------------------

    def _view(self, tx: Any, user_id: int) -> CartViewDTO:
        cart_id = self._cart_repo.get_or_create_cart(tx, user_id)
        lines: list[CartLineDTO] = []
        subtotal = Money.zero()
        for item in self._cart_repo.items(tx, cart_id):
            product = self._product_repo.find_by_code(tx, Code(item.product_code))
            if product is None:
                raise UnknownProductError(item.product_code)
            line_total = product.price * item.quantity
            subtotal = subtotal + line_total
            lines.append(
                CartLineDTO(
                    product_code=product.code.value,
                    product_name=product.name,
                    unit_price=str(product.price),
                    quantity=item.quantity,
                    line_total=str(line_total),
                )
            )
        return CartViewDTO(lines=lines, subtotal=str(subtotal))
