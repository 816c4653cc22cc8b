"""Payment collaborator consumed by the order coordinator."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol


class PaymentService(Protocol):

    async def charge(self, amount: Decimal, customer_email: str, order_id: str) -> bool:
        """Charge the customer. True means the charge went through."""
