"""Domain events and notification sinks.

Both sinks are fire-and-forget from the checkout's point of view: they
may be called inside a transaction, but their own durability is the
implementation's concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from pos.domain.model.value_objects import Code


@dataclass(frozen=True)
class LowStockEvent:
    product_code: Code
    remaining: int


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, event: LowStockEvent) -> None:
        """Deliver a typed domain event to subscribers."""


class ShortageLog(ABC):

    @abstractmethod
    def record(self, tx: Any, message: str) -> None:
        """Persist a free-text shortage notification."""
