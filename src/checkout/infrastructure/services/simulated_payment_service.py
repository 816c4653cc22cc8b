"""PaymentService that approves charges up to a configured limit.

Stands in for a real payment gateway when running the CLI locally.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from checkout.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class SimulatedPaymentService:

    def __init__(self, limit: Money) -> None:
        self._limit = limit
        self.charges: list[tuple[str, Money]] = []

    async def charge(self, amount: Decimal, customer_email: str, order_id: str) -> bool:
        money = Money(amount)
        if money > self._limit:
            logger.info(
                "Declined %s for order %s: above limit %s", money, order_id, self._limit
            )
            return False
        self.charges.append((order_id, money))
        logger.info("Charged %s to %s for order %s", money, customer_email, order_id)
        return True
