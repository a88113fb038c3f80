"""Notification sink implementations."""

from __future__ import annotations

import structlog

from pos.domain.events import EventPublisher, LowStockEvent

logger = structlog.get_logger(__name__)


class LoggingEventPublisher(EventPublisher):
    """Publishes low-stock events as structured warnings."""

    def publish(self, event: LowStockEvent) -> None:
        logger.warning(
            "Low stock",
            product_code=event.product_code.value,
            remaining=event.remaining,
        )
