"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each failure kind gets its own class so callers can tell "out of stock"
apart from "card declined" without parsing messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DiscountExceedsSubtotalError(ValidationError):
    """A discount larger than the subtotal would produce a negative total."""


class InsufficientCashError(ValidationError):
    """Cash tendered does not cover the bill total."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnknownProductError(EntityNotFoundError):

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown product: {code}")
        self.code = code


class EmptyCartError(EntityNotFoundError):
    """The user's cart has no items to check out."""


class InsufficientStockError(DomainException):
    """Aggregate shortage: the location holds less than was requested."""

    def __init__(
        self,
        product_code: str,
        location: str,
        available: int,
        requested: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message
            or (
                f"Insufficient stock for {product_code} at {location}. "
                f"Available: {available}, Requested: {requested}"
            )
        )
        self.product_code = product_code
        self.location = location
        self.available = available
        self.requested = requested


class InsufficientStockAtLocationError(InsufficientStockError):

    def __init__(
        self, product_code: str, location: str, available: int, requested: int
    ) -> None:
        super().__init__(
            product_code,
            location,
            available,
            requested,
            message=(
                f"Insufficient stock at {location}. "
                f"Available: {available}, Requested: {requested}"
            ),
        )


class BatchConcurrencyError(DomainException):
    """A conditional batch decrement matched no row.

    Another transaction consumed the stock between read and update, or the
    batch no longer holds enough units.
    """

    def __init__(self, batch_id: int, amount: int) -> None:
        super().__init__(
            f"Batch #{batch_id} could not be decremented by {amount} "
            f"(concurrent update or insufficient quantity)"
        )
        self.batch_id = batch_id
        self.amount = amount


class InvalidCardError(DomainException):
    """Card details failed validation."""


class TransferOperationError(DomainException):
    """Deducting or inserting stock during a transfer failed."""
