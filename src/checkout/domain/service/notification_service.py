"""Notification collaborator consumed by the order coordinator."""

from __future__ import annotations

from typing import Protocol

from checkout.domain.model.confirmation import OrderConfirmation


class NotificationService(Protocol):

    async def send_order_confirmation(
        self, customer_email: str, order_details: OrderConfirmation
    ) -> None:
        """Tell the customer the order went through."""

    async def send_payment_failed_notification(
        self, customer_email: str, reason: str
    ) -> None:
        """Tell the customer the order failed; *reason* is a message or order id."""
