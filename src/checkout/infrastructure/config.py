"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from checkout.domain.exceptions import DomainException, ValidationError
from checkout.domain.model.value_objects import Money

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: int = logging.WARNING
    payment_limit: Money = Money.of("10000.00")

    @property
    def stock_file(self) -> Path:
        return self.data_dir / "stock.json"


def load_settings() -> Settings:
    load_dotenv()

    data_dir = os.getenv("CHECKOUT_DATA_DIR")

    level_name = os.getenv("CHECKOUT_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValidationError(f"CHECKOUT_LOG_LEVEL: unknown level {level_name!r}")

    raw_limit = os.getenv("CHECKOUT_PAYMENT_LIMIT", "10000.00")
    try:
        limit = Money.of(raw_limit)
    except DomainException as exc:
        raise ValidationError(f"CHECKOUT_PAYMENT_LIMIT: {exc}") from exc

    return Settings(
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        log_level=level,
        payment_limit=limit,
    )
