"""Card details supplied at web checkout.

Only the last four digits and an authorization reference are ever
persisted. No Luhn check is performed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

_CARD_NUMBER = re.compile(r"[0-9]{16}")
_CVV = re.compile(r"[0-9]{3}")


@dataclass(frozen=True)
class CardDetails:
    number: str
    exp_month: int
    exp_year: int
    cvv: str

    def is_valid(self, today: date | None = None) -> bool:
        return (
            self._valid_number()
            and self._valid_cvv()
            and self._valid_expiry(today or date.today())
        )

    @property
    def last4(self) -> str:
        if not self.number or len(self.number) < 4:
            return ""
        return self.number[-4:]

    def __repr__(self) -> str:
        return f"CardDetails(last4={self.last4!r}, exp={self.exp_month:02d}/{self.exp_year})"

    # --- Rules ----------------------------------------------------------------

    def _valid_number(self) -> bool:
        return self.number is not None and _CARD_NUMBER.fullmatch(self.number) is not None

    def _valid_cvv(self) -> bool:
        return self.cvv is not None and _CVV.fullmatch(self.cvv) is not None

    def _valid_expiry(self, today: date) -> bool:
        # Card must expire after the current month.
        if not 1 <= self.exp_month <= 12:
            return False
        return (self.exp_year, self.exp_month) > (today.year, today.month)
