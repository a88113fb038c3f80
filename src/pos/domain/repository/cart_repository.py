"""Abstract repository for WEB carts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pos.domain.model.cart import CartItem


class CartRepository(ABC):

    @abstractmethod
    def get_or_create_cart(self, tx: Any, user_id: int) -> int:
        """Return the user's cart id, creating the cart on first use."""

    @abstractmethod
    def upsert_item(self, tx: Any, cart_id: int, product_code: str, quantity: int) -> None:
        """Set an item's quantity; a quantity <= 0 removes the item."""

    @abstractmethod
    def remove_item(self, tx: Any, cart_id: int, product_code: str) -> None:
        """Remove an item if present."""

    @abstractmethod
    def items(self, tx: Any, cart_id: int) -> list[CartItem]:
        """Return every item in the cart."""

    @abstractmethod
    def clear_cart(self, tx: Any, cart_id: int) -> None:
        """Remove all items from the cart."""
