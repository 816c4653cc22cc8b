"""Order confirmation payload handed to the notification service."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from checkout.domain.model.line_item import LineItem


@dataclass(frozen=True)
class OrderConfirmation:
    """Snapshot of a checked-out order.

    ``items`` is a copy taken at confirmation time; ``total_amount`` is the
    amount that was charged (zero when payment was skipped).
    """

    order_id: str
    items: tuple[LineItem, ...]
    total_amount: Decimal
    status: str
