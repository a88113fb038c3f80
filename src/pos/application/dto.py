"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.billing import Quote


@dataclass(frozen=True)
class LineItemSpec:
    """Input: a product code and how many units the customer wants."""

    product_code: str
    quantity: int


@dataclass(frozen=True)
class CardCheckoutResult:
    """Output of a web checkout."""

    order_id: int
    bill_serial: int
    quote: Quote
    formatted_order_id: str  # e.g. "WEB-20261019-142501-000001"


@dataclass(frozen=True)
class CartLineDTO:
    product_code: str
    product_name: str
    unit_price: str  # formatted, e.g. "$15.00"
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartViewDTO:
    lines: list[CartLineDTO]
    subtotal: str


@dataclass(frozen=True)
class StockLevelDTO:
    location: str
    available: int
