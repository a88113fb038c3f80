"""Abstract repository for online orders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pos.domain.model.billing import BillLine, Quote


class OrderRepository(ABC):

    @abstractmethod
    def save_preview(
        self,
        tx: Any,
        scope: str,
        location: str,
        user_id: int | None,
        bill_serial: int,
        quote: Quote,
    ) -> int:
        """Insert an order in PREVIEW status and return its id."""

    @abstractmethod
    def save_lines(self, tx: Any, order_id: int, lines: list[BillLine]) -> None:
        """Insert the order's priced lines."""

    @abstractmethod
    def save_final(self, tx: Any, order_id: int, quote: Quote) -> None:
        """Mark the order FINAL with the quote's totals."""
