"""Abstract repository for payment records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PaymentRepository(ABC):

    @abstractmethod
    def save_card(self, tx: Any, order_id: int, last4: str, auth_ref: str) -> None:
        """Record a card payment against an order."""
