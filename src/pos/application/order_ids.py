"""External order identifiers: ``PREFIX-YYYYMMDD-HHMMSS-NNNNNN``."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable

MAX_SEQUENCE = 999_999


class OrderIdGenerator:
    """Thread-safe generator; the sequence wraps back to 1 after 999999."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._next = 1

    def generate(self, prefix: str) -> str:
        with self._lock:
            sequence = self._next
            self._next = 1 if sequence >= MAX_SEQUENCE else sequence + 1
        now = self._clock()
        return f"{prefix}-{now:%Y%m%d}-{now:%H%M%S}-{sequence:06d}"

    def reset(self) -> None:
        with self._lock:
            self._next = 1


# Process-wide generator; every CheckoutUseCase shares this counter by default.
order_id_generator = OrderIdGenerator()
