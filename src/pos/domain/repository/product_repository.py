"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Code


class ProductRepository(ABC):

    @abstractmethod
    def find_by_code(self, tx: Any, code: Code) -> Product | None:
        """Return a product by its code, or None if not found."""

    @abstractmethod
    def save(self, tx: Any, product: Product) -> None:
        """Persist a new or updated product."""
