"""Runtime settings, read from environment variables at call time."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    database_url: str
    low_stock_threshold: int
    log_level: str


def load_settings() -> Settings:
    return Settings(
        database_url=os.environ.get(
            "POS_DATABASE_URL",
            f"sqlite:///{_DATA_DIR / 'pos.sqlite3'}",
        ),
        low_stock_threshold=int(os.environ.get("POS_LOW_STOCK_THRESHOLD", "50")),
        log_level=os.environ.get("POS_LOG_LEVEL", "INFO").upper(),
    )
