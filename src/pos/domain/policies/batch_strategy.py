"""Batch selection strategies: which batches to drain, in which order.

Both strategies share the same deduction loop and differ only in how
they order candidate batches:

- FIFO (``FifoStrategy``): oldest arrival first.
- FEFO (``FefoStrategy``): soonest expiry first, non-expiring batches
  last (by arrival).

Each batch is decremented through the repository's conditional update,
so a batch consumed concurrently surfaces as ``BatchConcurrencyError``
rather than going negative.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Callable

import structlog

from pos.domain.exceptions import InsufficientStockError, ValidationError
from pos.domain.model.inventory import Batch, StockLocation
from pos.domain.model.value_objects import Code
from pos.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)

BatchOrdering = Callable[[Batch], tuple]


class BatchSelectionStrategy(ABC):

    @abstractmethod
    def deduct(
        self, tx: Any, product_code: Code, quantity: int, location: StockLocation
    ) -> None:
        """Remove exactly ``quantity`` units or raise InsufficientStockError."""

    @abstractmethod
    def deduct_up_to(
        self, tx: Any, product_code: Code, quantity: int, location: StockLocation
    ) -> int:
        """Remove as many units as available, up to ``quantity``; return the amount taken."""


def arrival_order(batch: Batch) -> tuple:
    return (batch.received_at, batch.id)


def expiry_order(batch: Batch) -> tuple:
    # Expiring batches sort before non-expiring ones.
    if batch.expiry is None:
        return (1, date.max, batch.received_at, batch.id)
    return (0, batch.expiry, batch.received_at, batch.id)


class OrderedBatchStrategy(BatchSelectionStrategy):
    """Deduction loop over candidates sorted by an ordering key."""

    name = "ORDERED"

    def __init__(self, inventory: InventoryRepository, ordering: BatchOrdering) -> None:
        if inventory is None:
            raise ValueError("Inventory repository cannot be null")
        self._inventory = inventory
        self._ordering = ordering

    def deduct(
        self, tx: Any, product_code: Code, quantity: int, location: StockLocation
    ) -> None:
        self._check_quantity(quantity)
        candidates = self._candidates(tx, product_code, location)

        # Detect the shortfall before touching any batch.
        available = sum(b.quantity for b in candidates)
        if available < quantity:
            raise InsufficientStockError(
                product_code.value, location.value, available, quantity
            )

        taken = self._drain(tx, candidates, quantity)
        logger.debug(
            "Stock deducted",
            strategy=self.name,
            product_code=product_code.value,
            location=location.value,
            quantity=taken,
        )

    def deduct_up_to(
        self, tx: Any, product_code: Code, quantity: int, location: StockLocation
    ) -> int:
        self._check_quantity(quantity)
        candidates = self._candidates(tx, product_code, location)
        taken = self._drain(tx, candidates, quantity)
        if taken < quantity:
            logger.info(
                "Partial deduction",
                strategy=self.name,
                product_code=product_code.value,
                location=location.value,
                requested=quantity,
                taken=taken,
            )
        return taken

    # --- Internal helpers -----------------------------------------------------

    def _candidates(
        self, tx: Any, product_code: Code, location: StockLocation
    ) -> list[Batch]:
        batches = self._inventory.find_deduction_candidates(tx, product_code, location)
        return sorted(
            (b for b in batches if b.quantity > 0),
            key=self._ordering,
        )

    def _drain(self, tx: Any, candidates: list[Batch], quantity: int) -> int:
        remaining = quantity
        for batch in candidates:
            if remaining <= 0:
                break
            take = min(remaining, batch.quantity)
            self._inventory.deduct_from_batch(tx, batch.id, take)
            remaining -= take
        return quantity - remaining

    @staticmethod
    def _check_quantity(quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got: {quantity}")


class FifoStrategy(OrderedBatchStrategy):
    """First-in, first-out: oldest received batch first."""

    name = "FIFO"

    def __init__(self, inventory: InventoryRepository) -> None:
        super().__init__(inventory, arrival_order)


class FefoStrategy(OrderedBatchStrategy):
    """First-expired, first-out: soonest expiry first, non-expiring last."""

    name = "FEFO"

    def __init__(self, inventory: InventoryRepository) -> None:
        super().__init__(inventory, expiry_order)
