"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from checkout.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount, always held at cent precision.

    Rounding is half-up on the decimal representation, so 99.999 becomes
    100.00 and 0.005 becomes 0.01.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        object.__setattr__(self, "amount", self.amount.quantize(CENT, ROUND_HALF_UP))

    # --- Comparison ----------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
