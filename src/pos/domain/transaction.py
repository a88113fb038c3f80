"""Transactional executor port.

Every mutating use case runs its work through ``TransactionRunner.run``.
The work receives an opaque transaction handle which it passes to every
repository call, so all reads and writes of one call share a single
transaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class TransactionRunner(ABC):

    @abstractmethod
    def run(self, work: Callable[[Any], T]) -> T:
        """Run ``work(tx)``; commit on normal return, roll back and re-raise on error."""
