"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from pos.application.dto import StockLevelDTO
from pos.domain.model.inventory import StockLocation
from pos.domain.model.value_objects import Code
from pos.domain.repository.inventory_repository import InventoryRepository
from pos.domain.transaction import TransactionRunner


class ShowStockHandler:

    def __init__(
        self, tx_runner: TransactionRunner, inventory_repo: InventoryRepository
    ) -> None:
        self._tx_runner = tx_runner
        self._inventory_repo = inventory_repo

    def handle(self, product_code: str) -> list[StockLevelDTO]:
        code = Code(product_code)
        return self._tx_runner.run(
            lambda tx: [
                StockLevelDTO(
                    location=location.value,
                    available=self._inventory_repo.total_available(tx, code, location),
                )
                for location in StockLocation
            ]
        )
