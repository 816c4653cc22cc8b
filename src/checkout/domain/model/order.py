"""Order aggregate: line items, discount and payment state of one checkout.

The Order owns its line items. Item validation problems are not errors
here: a rejected item or a missing id only produces a warning in the log
and leaves the order untouched.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum

from checkout.domain.exceptions import InvalidEmailError, ValidationError
from checkout.domain.model.line_item import LineItem
from checkout.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DISCOUNT_CODE = "SALE10"
DISCOUNT_FACTOR = Decimal("0.9")


@dataclass
class Order:
    """Aggregate root for a single checkout.

    Use the ``Order.create()`` factory: it validates the email and assigns
    a fresh ``order_id``.
    """

    customer_email: str
    order_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    items: list[LineItem] = field(default_factory=list)
    discount_applied: bool = False
    payment_status: PaymentStatus = PaymentStatus.PENDING

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(customer_email: str) -> Order:
        if not customer_email or "@" not in customer_email:
            raise InvalidEmailError(f"Invalid customer email: {customer_email!r}")
        return Order(customer_email=customer_email)

    # --- Line items -----------------------------------------------------------

    def add_item(self, item: LineItem) -> None:
        """Add *item*, or merge its quantity into an entry with the same id.

        The stored entry keeps its original price; only the quantity grows.
        """
        if not item.is_valid:
            logger.warning(
                "Rejected item %s (%s): invalid quantity %s or price %s",
                item.id, item.name, item.quantity, item.unit_price,
            )
            return

        existing = self._find_item(item.id)
        if existing is not None:
            existing.quantity += item.quantity
        else:
            self.items.append(replace(item))

    def remove_item(self, item_id: str) -> None:
        existing = self._find_item(item_id)
        if existing is None:
            logger.warning("Item %s not found in order %s", item_id, self.order_id)
            return
        self.items.remove(existing)

    # --- Pricing --------------------------------------------------------------

    def apply_discount(self, code: str) -> bool:
        """Accept the discount code once; any other call returns False."""
        if code == DISCOUNT_CODE and not self.discount_applied:
            self.discount_applied = True
            return True
        return False

    @property
    def total(self) -> Money:
        subtotal = sum((item.line_total for item in self.items), Decimal("0"))
        if self.discount_applied:
            subtotal *= DISCOUNT_FACTOR
        return Money(subtotal)

    # --- State transitions ----------------------------------------------------

    def mark_paid(self) -> None:
        """Transition pending -> paid."""
        self._assert_pending()
        self.payment_status = PaymentStatus.PAID

    def mark_failed(self) -> None:
        """Transition pending -> failed."""
        self._assert_pending()
        self.payment_status = PaymentStatus.FAILED

    # --- Display --------------------------------------------------------------

    def summary(self) -> str:
        return (
            f"Order ID: {self.order_id}, Email: {self.customer_email}, "
            f"Items: {len(self.items)}, Total: {self.total}, "
            f"Discount: {'Yes' if self.discount_applied else 'No'}, "
            f"Payment status: {self.payment_status.value}."
        )

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, item_id: str) -> LineItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def _assert_pending(self) -> None:
        if self.payment_status != PaymentStatus.PENDING:
            raise ValidationError(
                f"Cannot change payment status of order {self.order_id} "
                f"(current status is {self.payment_status.value}, expected pending)"
            )
