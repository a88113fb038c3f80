"""SQLAlchemy-backed transactional executor.

The transaction handle given to the work function is a ``Session`` inside
``session.begin()``: it commits when the work returns and rolls back when
it raises.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import structlog
from sqlalchemy.orm import Session, sessionmaker

from pos.domain.transaction import TransactionRunner

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class SqlAlchemyTransactionRunner(TransactionRunner):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def run(self, work: Callable[[Session], T]) -> T:
        with self._session_factory() as session:
            try:
                with session.begin():
                    return work(session)
            except Exception as exc:
                logger.info(
                    "Transaction rolled back",
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise
