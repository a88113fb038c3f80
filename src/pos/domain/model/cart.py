"""Web-shop cart contents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItem:
    """One ``product_code -> quantity`` entry of a user's WEB cart."""

    product_code: str
    quantity: int
