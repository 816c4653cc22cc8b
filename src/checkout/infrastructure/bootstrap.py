"""Composition root: wires concrete collaborators to the coordinator.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from checkout.application.order_coordinator import OrderCoordinator
from checkout.infrastructure.config import Settings
from checkout.infrastructure.services.console_notification_service import (
    ConsoleNotificationService,
)
from checkout.infrastructure.services.json_stock_service import JsonStockService
from checkout.infrastructure.services.simulated_payment_service import (
    SimulatedPaymentService,
)


def stock_service(settings: Settings) -> JsonStockService:
    return JsonStockService(settings.stock_file)


def order_coordinator(settings: Settings, customer_email: str) -> OrderCoordinator:
    return OrderCoordinator(
        customer_email,
        stock_service=stock_service(settings),
        payment_service=SimulatedPaymentService(settings.payment_limit),
        notification_service=ConsoleNotificationService(),
    )
