"""Abstract repositories for counter bills and serial numbers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pos.domain.model.billing import Bill


class BillRepository(ABC):

    @abstractmethod
    def save(self, tx: Any, bill: Bill) -> int:
        """Persist a bill with its lines; assign and return its id."""


class SerialRepository(ABC):

    @abstractmethod
    def next_serial(self, tx: Any, scope: str) -> int:
        """Return the next number in a scope's sequence ("COUNTER", "ONLINE").

        Sequences start at 1 and never repeat a committed value.
        """
