"""Product aggregate.

Products live independently of bills and orders. Prices change over
time; bills and orders capture a price snapshot at sale time.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Code, Money


@dataclass
class Product:
    """A product in the catalog."""

    code: Code
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        self.name = self.name.strip()

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing bills and orders keep the price they were sold at.
        """
        if new_price.cents <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
