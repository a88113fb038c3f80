"""Abstract repositories for batch inventory.

The read/deduct side (``InventoryRepository``) serves allocation; the
admin side (``InventoryAdminRepository``) creates batches for supplier
receipts and transfers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any

from pos.domain.model.inventory import Batch, StockLocation
from pos.domain.model.value_objects import Code


class InventoryRepository(ABC):

    @abstractmethod
    def find_deduction_candidates(
        self, tx: Any, code: Code, location: StockLocation
    ) -> list[Batch]:
        """Return snapshots of the product's batches at a location with quantity > 0.

        No ordering is guaranteed; the deduction strategy orders them.
        """

    @abstractmethod
    def total_available(self, tx: Any, code: Code, location: StockLocation) -> int:
        """Sum of remaining quantity for the product at a location."""

    @abstractmethod
    def deduct_from_batch(self, tx: Any, batch_id: int, amount: int) -> None:
        """Decrement a batch by ``amount`` only if it still holds that many.

        Raises BatchConcurrencyError when no row was updated.
        """


class InventoryAdminRepository(ABC):

    @abstractmethod
    def insert_batch(
        self,
        tx: Any,
        code: Code,
        location: StockLocation,
        received_at: datetime,
        expiry: date | None,
        quantity: int,
    ) -> int:
        """Create a batch and return its generated id."""
