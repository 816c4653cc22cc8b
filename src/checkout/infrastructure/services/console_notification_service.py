"""NotificationService that writes customer messages to the terminal."""

from __future__ import annotations

from typing import Callable

import click

from checkout.domain.model.confirmation import OrderConfirmation


class ConsoleNotificationService:

    def __init__(self, echo: Callable[[str], None] = click.echo) -> None:
        self._echo = echo

    async def send_order_confirmation(
        self, customer_email: str, order_details: OrderConfirmation
    ) -> None:
        self._echo(
            f"[to {customer_email}] Order {order_details.order_id} confirmed "
            f"(status={order_details.status})"
        )
        for item in order_details.items:
            self._echo(
                f"  {item.name:<20} {item.quantity:>5} {item.unit_price:>10.2f} "
                f"{item.line_total:>10.2f}"
            )
        self._echo(f"  {'Order Total':<20} {order_details.total_amount:>27.2f}")

    async def send_payment_failed_notification(
        self, customer_email: str, reason: str
    ) -> None:
        self._echo(f"[to {customer_email}] Your order could not be completed: {reason}")
