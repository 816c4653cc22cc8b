"""Tests for the simulated payment and console notification services."""

import asyncio
from decimal import Decimal

from checkout.domain.model.confirmation import OrderConfirmation
from checkout.domain.model.line_item import LineItem
from checkout.domain.model.value_objects import Money
from checkout.infrastructure.services.console_notification_service import (
    ConsoleNotificationService,
)
from checkout.infrastructure.services.simulated_payment_service import (
    SimulatedPaymentService,
)


class TestSimulatedPaymentService:

    def test_approves_up_to_limit(self):
        svc = SimulatedPaymentService(limit=Money.of("100"))
        assert asyncio.run(svc.charge(Decimal("100.00"), "a@b.c", "o-1")) is True
        assert svc.charges == [("o-1", Money.of("100"))]

    def test_declines_above_limit(self):
        svc = SimulatedPaymentService(limit=Money.of("100"))
        assert asyncio.run(svc.charge(Decimal("100.01"), "a@b.c", "o-1")) is False
        assert svc.charges == []


class TestConsoleNotificationService:

    def test_confirmation_lists_items_and_total(self):
        lines = []
        svc = ConsoleNotificationService(echo=lines.append)
        details = OrderConfirmation(
            order_id="o-1",
            items=(LineItem(id="w", name="Widget", unit_price="15", quantity=2),),
            total_amount=Decimal("30.00"),
            status="paid",
        )

        asyncio.run(svc.send_order_confirmation("a@b.c", details))

        assert lines[0] == "[to a@b.c] Order o-1 confirmed (status=paid)"
        assert "Widget" in lines[1] and "30.00" in lines[1]
        assert lines[-1].endswith("30.00")

    def test_failure_notice(self):
        lines = []
        svc = ConsoleNotificationService(echo=lines.append)
        asyncio.run(svc.send_payment_failed_notification("a@b.c", "o-1"))
        assert lines == ["[to a@b.c] Your order could not be completed: o-1"]
