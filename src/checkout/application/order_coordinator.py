"""Application service: the checkout workflow for a single order.

Orchestrates the Order aggregate and the three injected collaborators
(stock, payment, notification). Checkout is one linear pass with no
rollback:

1. verify stock for every item, in insertion order
2. charge the payment service (skipped for a zero total)
3. deduct stock, best-effort
4. send the order confirmation

Business failures (empty order, out-of-stock item, declined payment) are
reported as a ``False`` return plus a log entry; they never raise.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal

from checkout.domain.model.confirmation import OrderConfirmation
from checkout.domain.model.line_item import LineItem
from checkout.domain.model.order import Order, PaymentStatus
from checkout.domain.service.notification_service import NotificationService
from checkout.domain.service.payment_service import PaymentService
from checkout.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class OrderCoordinator:

    def __init__(
        self,
        customer_email: str,
        stock_service: StockService,
        payment_service: PaymentService,
        notification_service: NotificationService,
    ) -> None:
        self._order = Order.create(customer_email)
        self._stock_service = stock_service
        self._payment_service = payment_service
        self._notification_service = notification_service

    # --- Read-only state ------------------------------------------------------

    @property
    def order_id(self) -> str:
        return self._order.order_id

    @property
    def customer_email(self) -> str:
        return self._order.customer_email

    @property
    def items(self) -> list[LineItem]:
        return [replace(item) for item in self._order.items]

    @property
    def discount_applied(self) -> bool:
        return self._order.discount_applied

    @property
    def payment_status(self) -> PaymentStatus:
        return self._order.payment_status

    # --- Building the order ---------------------------------------------------

    def add_item(self, item: LineItem) -> None:
        self._order.add_item(item)

    def remove_item(self, item_id: str) -> None:
        self._order.remove_item(item_id)

    def apply_discount(self, code: str) -> bool:
        return self._order.apply_discount(code)

    def calculate_total(self) -> Decimal:
        return self._order.total.amount

    def get_order_status(self) -> str:
        return self._order.summary()

    # --- Checkout -------------------------------------------------------------

    async def checkout(self) -> bool:
        order = self._order

        if order.payment_status != PaymentStatus.PENDING:
            logger.error(
                "Order %s was already checked out (status=%s)",
                order.order_id, order.payment_status.value,
            )
            return False

        if not order.items:
            logger.error("Order %s is empty, nothing to check out", order.order_id)
            return False

        # Stop at the first item that is short; later items are never checked
        for item in order.items:
            in_stock = await self._stock_service.check_stock(item.id, item.quantity)
            if not in_stock:
                logger.error(
                    "Item %s (ID: %s) is out of stock for quantity %s",
                    item.name, item.id, item.quantity,
                )
                order.mark_failed()
                await self._notification_service.send_payment_failed_notification(
                    order.customer_email,
                    f"Item {item.name} (ID: {item.id}) is out of stock",
                )
                return False

        total = order.total
        if total.is_zero:
            logger.warning(
                "Order %s has items but totals 0.00, skipping payment", order.order_id
            )
            order.mark_paid()
        else:
            charged = await self._payment_service.charge(
                total.amount, order.customer_email, order.order_id
            )
            if not charged:
                order.mark_failed()
                logger.error("Payment for order %s was declined", order.order_id)
                await self._notification_service.send_payment_failed_notification(
                    order.customer_email, order.order_id
                )
                return False
            order.mark_paid()

        await self._reduce_stock(order)

        await self._notification_service.send_order_confirmation(
            order.customer_email,
            OrderConfirmation(
                order_id=order.order_id,
                items=tuple(replace(item) for item in order.items),
                total_amount=total.amount,
                status=order.payment_status.value,
            ),
        )
        return True

    async def _reduce_stock(self, order: Order) -> None:
        """Deduct stock after payment.

        The customer has already paid, so a failure here is logged and
        swallowed; the remaining items are left untouched.
        """
        try:
            for item in order.items:
                await self._stock_service.reduce_stock(item.id, item.quantity)
        except Exception as exc:
            logger.critical(
                "Stock reduction failed for paid order %s: %s",
                order.order_id, exc,
                exc_info=exc,
            )
