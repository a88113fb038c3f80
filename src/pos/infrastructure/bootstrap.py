"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from pos.application.add_product import AddProductHandler
from pos.application.checkout import CheckoutUseCase
from pos.application.online_cart import OnlineCartUseCase
from pos.application.order_ids import order_id_generator
from pos.application.quote import QuoteUseCase
from pos.application.receive_from_supplier import ReceiveFromSupplierUseCase
from pos.application.show_stock import ShowStockHandler
from pos.application.transfer_stock import TransferStockUseCase
from pos.domain.policies.batch_strategy import FefoStrategy, FifoStrategy
from pos.infrastructure.config import Settings, load_settings
from pos.infrastructure.events import LoggingEventPublisher
from pos.infrastructure.persistence.models import create_schema
from pos.infrastructure.persistence.sql_bill_repository import (
    SqlBillRepository,
    SqlSerialRepository,
)
from pos.infrastructure.persistence.sql_cart_repository import SqlCartRepository
from pos.infrastructure.persistence.sql_inventory_repository import (
    SqlInventoryRepository,
)
from pos.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
    SqlPaymentRepository,
)
from pos.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from pos.infrastructure.persistence.sql_shortage_log import SqlShortageLog
from pos.infrastructure.persistence.transaction import SqlAlchemyTransactionRunner


@lru_cache(maxsize=None)
def engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        Path(database_url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url)


def init_db(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    create_schema(engine(settings.database_url))


def transaction_runner(settings: Settings | None = None) -> SqlAlchemyTransactionRunner:
    settings = settings or load_settings()
    return SqlAlchemyTransactionRunner(
        sessionmaker(bind=engine(settings.database_url), expire_on_commit=False)
    )


def add_product_handler(settings: Settings | None = None) -> AddProductHandler:
    return AddProductHandler(transaction_runner(settings), SqlProductRepository())


def quote_use_case(settings: Settings | None = None) -> QuoteUseCase:
    return QuoteUseCase(transaction_runner(settings), SqlProductRepository())


def checkout_use_case(settings: Settings | None = None) -> CheckoutUseCase:
    settings = settings or load_settings()
    inventory = SqlInventoryRepository()
    return CheckoutUseCase(
        tx_runner=transaction_runner(settings),
        quote_use_case=quote_use_case(settings),
        inventory_repo=inventory,
        bill_repo=SqlBillRepository(),
        serial_repo=SqlSerialRepository(),
        batch_strategy=FifoStrategy(inventory),
        event_publisher=LoggingEventPublisher(),
        cart_repo=SqlCartRepository(),
        order_repo=SqlOrderRepository(),
        payment_repo=SqlPaymentRepository(),
        fefo_strategy=FefoStrategy(inventory),
        shortage_log=SqlShortageLog(),
        low_stock_threshold=settings.low_stock_threshold,
        order_ids=order_id_generator,
    )


def transfer_stock_use_case(settings: Settings | None = None) -> TransferStockUseCase:
    inventory = SqlInventoryRepository()
    return TransferStockUseCase(
        tx_runner=transaction_runner(settings),
        inventory_repo=inventory,
        inventory_admin_repo=inventory,
        batch_strategy=FifoStrategy(inventory),
    )


def receive_use_case(settings: Settings | None = None) -> ReceiveFromSupplierUseCase:
    return ReceiveFromSupplierUseCase(
        tx_runner=transaction_runner(settings),
        product_repo=SqlProductRepository(),
        inventory_admin_repo=SqlInventoryRepository(),
    )


def online_cart_use_case(settings: Settings | None = None) -> OnlineCartUseCase:
    return OnlineCartUseCase(
        tx_runner=transaction_runner(settings),
        cart_repo=SqlCartRepository(),
        product_repo=SqlProductRepository(),
    )


def show_stock_handler(settings: Settings | None = None) -> ShowStockHandler:
    return ShowStockHandler(transaction_runner(settings), SqlInventoryRepository())
