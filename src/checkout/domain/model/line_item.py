"""LineItem: a single product entry in an order."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from checkout.domain.exceptions import ValidationError


@dataclass
class LineItem:
    """A product entry identified by ``id``, carrying price and quantity.

    Construction does not validate quantity or price: an order decides
    whether to accept the item (see ``Order.add_item``). Only the quantity
    of a stored item ever changes, when the same id is added again.
    """

    id: str
    name: str
    unit_price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.unit_price, Decimal):
            try:
                self.unit_price = Decimal(str(self.unit_price))
            except InvalidOperation as exc:
                raise ValidationError(
                    f"Invalid unit price for {self.name}: {self.unit_price!r}"
                ) from exc

    @property
    def is_valid(self) -> bool:
        # NaN and Infinity parse as Decimal but cannot be priced
        if not self.unit_price.is_finite():
            return False
        return self.quantity > 0 and self.unit_price >= 0

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity
