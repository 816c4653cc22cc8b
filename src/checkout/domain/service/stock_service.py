"""Stock collaborator consumed by the order coordinator.

Defined in the domain layer so the domain never depends on
infrastructure. Any object with these coroutines conforms; no base
class is required.
"""

from __future__ import annotations

from typing import Protocol


class StockService(Protocol):

    async def check_stock(self, item_id: str, quantity: int) -> bool:
        """Return True if *quantity* units of *item_id* are available."""

    async def reduce_stock(self, item_id: str, quantity: int) -> None:
        """Permanently deduct *quantity* units. May raise."""
