"""JSON-file-backed implementation of StockService.

The file holds one object mapping item id to units on hand, e.g.
``{"widget": 12, "gadget": 4}``. Key order is insertion order.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from checkout.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class StockLevel:
    item_id: str
    quantity: int


class JsonStockService:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        if not file_path.exists():
            file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write({})

    # --- StockService interface -----------------------------------------------

    async def check_stock(self, item_id: str, quantity: int) -> bool:
        return self._read().get(item_id, 0) >= quantity

    async def reduce_stock(self, item_id: str, quantity: int) -> None:
        levels = self._read()
        on_hand = levels.get(item_id)
        if on_hand is None:
            raise EntityNotFoundError(f"No stock record for item '{item_id}'")
        if quantity > on_hand:
            raise ValidationError(
                f"Insufficient stock for {item_id} (need {quantity}, have {on_hand})"
            )
        levels[item_id] = on_hand - quantity
        self._write(levels)
        logger.info("Reduced stock of %s by %s to %s", item_id, quantity, levels[item_id])

    # --- Administration -------------------------------------------------------

    def get_level(self, item_id: str) -> StockLevel | None:
        on_hand = self._read().get(item_id)
        if on_hand is None:
            return None
        return StockLevel(item_id=item_id, quantity=on_hand)

    def list_levels(self) -> list[StockLevel]:
        return [StockLevel(item_id, qty) for item_id, qty in self._read().items()]

    def set_level(self, item_id: str, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        levels = self._read()
        levels[item_id] = quantity
        self._write(levels)

    # --- File helpers ---------------------------------------------------------

    def _read(self) -> dict[str, int]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _write(self, levels: dict[str, int]) -> None:
        self._file_path.write_text(json.dumps(levels, indent=2) + "\n", encoding="utf-8")
