"""Application service: Checkout use case.

Two checkout flows share one transactional envelope:

- ``checkout_cash`` — counter sale paid in cash. Stock comes from the
  selling location; a SHELF sale that runs the shelf dry takes the rest
  from WEB.
- ``checkout_card`` — web-shop sale of the user's cart, paid by card,
  fulfilled from WEB in expiry order.

Everything a call does (bill/order rows, payment, batch decrements,
cart clearing, shortage log) happens in one transaction: any error
rolls all of it back.
"""

from __future__ import annotations

from typing import Any, Iterable

import structlog

from pos.application.dto import CardCheckoutResult, LineItemSpec
from pos.application.order_ids import OrderIdGenerator, order_id_generator
from pos.application.quote import QuoteUseCase
from pos.domain.events import EventPublisher, LowStockEvent, ShortageLog
from pos.domain.exceptions import EmptyCartError, InsufficientStockError, InvalidCardError
from pos.domain.model.billing import Bill
from pos.domain.model.card import CardDetails
from pos.domain.model.inventory import StockLocation
from pos.domain.model.value_objects import Code, Money
from pos.domain.policies.batch_strategy import BatchSelectionStrategy
from pos.domain.pricing.discount_policy import DiscountPolicy
from pos.domain.repository.bill_repository import BillRepository, SerialRepository
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.inventory_repository import InventoryRepository
from pos.domain.repository.order_repository import OrderRepository
from pos.domain.repository.payment_repository import PaymentRepository
from pos.domain.transaction import TransactionRunner

logger = structlog.get_logger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 50
COUNTER_SCOPE = "COUNTER"
ONLINE_SCOPE = "ONLINE"


def format_bill_serial(scope: str, number: int) -> str:
    """``COUNTER`` + 5 -> ``C-000005``."""
    return f"{scope[:1].upper()}-{number:06d}"


class CheckoutUseCase:

    def __init__(
        self,
        tx_runner: TransactionRunner,
        quote_use_case: QuoteUseCase,
        inventory_repo: InventoryRepository,
        bill_repo: BillRepository,
        serial_repo: SerialRepository,
        batch_strategy: BatchSelectionStrategy,
        event_publisher: EventPublisher,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        payment_repo: PaymentRepository,
        fefo_strategy: BatchSelectionStrategy,
        shortage_log: ShortageLog,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        order_ids: OrderIdGenerator | None = None,
    ) -> None:
        self._tx_runner = tx_runner
        self._quote_use_case = quote_use_case
        self._inventory_repo = inventory_repo
        self._bill_repo = bill_repo
        self._serial_repo = serial_repo
        self._batch_strategy = batch_strategy
        self._event_publisher = event_publisher
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._payment_repo = payment_repo
        self._fefo_strategy = fefo_strategy
        self._shortage_log = shortage_log
        self._low_stock_threshold = low_stock_threshold
        self._order_ids = order_ids or order_id_generator

    # --- Cash (counter) -------------------------------------------------------

    def checkout_cash(
        self,
        cart_items: Iterable[LineItemSpec],
        cash: Money,
        location: StockLocation,
        discount_policy: DiscountPolicy,
        scope: str = COUNTER_SCOPE,
    ) -> Bill:
        """Sell ``cart_items`` for cash and deduct stock at ``location``.

        Steps:
        1. Resolve every product (fail before any write if one is unknown).
        2. Build the bill with snapshot lines and the policy's discount;
           the bill rejects cash below total.
        3. Persist the bill.
        4. Deduct stock per line (SHELF falls back to WEB).
        """
        items = list(cart_items)

        def work(tx: Any) -> Bill:
            lines = self._quote_use_case.price_lines(tx, items)
            discount = discount_policy.discount_for(lines)
            serial = format_bill_serial(scope, self._serial_repo.next_serial(tx, scope))

            bill = Bill.create(serial=serial, lines=lines, discount=discount, cash=cash)
            self._bill_repo.save(tx, bill)

            for line in bill.lines:
                self._deduct_for_sale(tx, line.product_code, line.quantity.value, location)

            return bill

        bill = self._tx_runner.run(work)
        logger.info(
            "Cash checkout completed",
            bill_id=bill.id,
            bill_serial=bill.serial,
            location=location.value,
            total=str(bill.total),
            change=str(bill.change),
        )
        return bill

    def _deduct_for_sale(
        self, tx: Any, code: Code, quantity: int, location: StockLocation
    ) -> None:
        if location is not StockLocation.SHELF:
            self._batch_strategy.deduct(tx, code, quantity, location)
            return

        # Low-stock check reflects shelf stock before this sale.
        remaining = self._inventory_repo.total_available(tx, code, StockLocation.SHELF)
        if remaining < self._low_stock_threshold:
            self._event_publisher.publish(LowStockEvent(code, remaining))

        taken = self._batch_strategy.deduct_up_to(tx, code, quantity, StockLocation.SHELF)
        shortfall = quantity - taken
        if shortfall > 0:
            logger.info(
                "Shelf short, taking remainder from WEB",
                product_code=code.value,
                from_shelf=taken,
                from_web=shortfall,
            )
            self._batch_strategy.deduct(tx, code, shortfall, StockLocation.WEB)

    # --- Card (web shop) ------------------------------------------------------

    def checkout_card(
        self,
        user_id: int,
        discount_policy: DiscountPolicy,
        card: CardDetails,
    ) -> CardCheckoutResult:
        """Check out the user's WEB cart, paid by card.

        Preview order and payment are written before stock is deducted;
        that is only safe because the whole method is one transaction.
        """

        def work(tx: Any) -> CardCheckoutResult:
            cart_id = self._cart_repo.get_or_create_cart(tx, user_id)
            cart_items = self._cart_repo.items(tx, cart_id)
            if not cart_items:
                raise EmptyCartError("Cart is empty")

            # Fail fast before any write if WEB cannot cover the cart.
            for item in cart_items:
                available = self._inventory_repo.total_available(
                    tx, Code(item.product_code), StockLocation.WEB
                )
                if available < item.quantity:
                    raise InsufficientStockError(
                        item.product_code,
                        StockLocation.WEB.value,
                        available,
                        item.quantity,
                        message=(
                            f"Insufficient stock for {item.product_code}. "
                            f"Available: {available}, Required: {item.quantity}"
                        ),
                    )

            quote = self._quote_use_case.quote(
                [LineItemSpec(i.product_code, i.quantity) for i in cart_items],
                discount_policy,
                tx=tx,
            )

            bill_serial = self._serial_repo.next_serial(tx, ONLINE_SCOPE)
            order_id = self._order_repo.save_preview(
                tx, ONLINE_SCOPE, StockLocation.WEB.value, user_id, bill_serial, quote
            )
            self._order_repo.save_lines(tx, order_id, quote.lines)

            if not card.is_valid():
                raise InvalidCardError("Card details are invalid")

            self._payment_repo.save_card(tx, order_id, card.last4, f"AUTH-{bill_serial}")

            for item in cart_items:
                self._fefo_strategy.deduct(
                    tx, Code(item.product_code), item.quantity, StockLocation.WEB
                )

            self._order_repo.save_final(tx, order_id, quote)
            self._cart_repo.clear_cart(tx, cart_id)

            for item in cart_items:
                remaining = self._inventory_repo.total_available(
                    tx, Code(item.product_code), StockLocation.WEB
                )
                if remaining < self._low_stock_threshold:
                    self._shortage_log.record(
                        tx,
                        f"Low stock alert: {item.product_code} at WEB location "
                        f"has only {remaining} units remaining",
                    )

            return CardCheckoutResult(
                order_id=order_id,
                bill_serial=bill_serial,
                quote=quote,
                formatted_order_id=self._order_ids.generate(StockLocation.WEB.value),
            )

        result = self._tx_runner.run(work)
        logger.info(
            "Card checkout completed",
            user_id=user_id,
            order_id=result.order_id,
            bill_serial=result.bill_serial,
            total=str(result.quote.total),
        )
        return result
