"""Batch-based inventory.

Stock is held as batches: a quantity of one product received at one
location, with its own receipt time and an optional expiry date. Stock
enters at MAIN_STORE and moves to SHELF (retail floor) or WEB (online
fulfilment) by transfer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Code


class StockLocation(Enum):
    MAIN_STORE = "MAIN_STORE"
    SHELF = "SHELF"
    WEB = "WEB"

    @staticmethod
    def parse(raw: str) -> StockLocation:
        try:
            return StockLocation[raw.strip().upper()]
        except KeyError as exc:
            names = ", ".join(loc.value for loc in StockLocation)
            raise ValidationError(
                f"Unknown stock location {raw!r} (expected one of {names})"
            ) from exc


@dataclass
class Batch:
    """A snapshot of one persisted batch row.

    ``quantity`` is the remaining count. A batch that reaches zero stays
    on record but is never offered for allocation again. Instances
    returned by repositories are copies: mutation of the stored row goes
    through the repository's conditional decrement.
    """

    id: int
    product_code: Code
    location: StockLocation
    received_at: datetime
    expiry: date | None
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError(
                f"Batch quantity cannot be negative, got {self.quantity}"
            )

    @property
    def is_depleted(self) -> bool:
        return self.quantity == 0

    @property
    def expires(self) -> bool:
        return self.expiry is not None
