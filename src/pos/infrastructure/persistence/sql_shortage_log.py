"""SQLAlchemy implementation of ShortageLog: a persisted text log."""

from __future__ import annotations

import structlog
from sqlalchemy.orm import Session

from pos.domain.events import ShortageLog
from pos.infrastructure.persistence.models import ShortageEventRecord

logger = structlog.get_logger(__name__)


class SqlShortageLog(ShortageLog):

    def record(self, tx: Session, message: str) -> None:
        tx.add(ShortageEventRecord(message=message))
        tx.flush()
        logger.warning("Shortage recorded", message=message)
