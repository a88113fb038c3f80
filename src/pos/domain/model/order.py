"""Online order lifecycle.

A web checkout first writes a PREVIEW order with its lines, then marks it
FINAL once payment is recorded and stock is deducted.
"""

from __future__ import annotations

from enum import Enum


class OrderStatus(Enum):
    PREVIEW = "PREVIEW"
    FINAL = "FINAL"
