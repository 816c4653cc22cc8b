"""Unit tests for LineItem."""

from decimal import Decimal

import pytest

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.line_item import LineItem


class TestLineItem:

    def test_price_is_coerced_to_decimal(self):
        item = LineItem(id="a", name="Widget", unit_price=33.333, quantity=1)
        assert item.unit_price == Decimal("33.333")

    def test_line_total(self):
        item = LineItem(id="a", name="Widget", unit_price="15.00", quantity=3)
        assert item.line_total == Decimal("45.00")

    @pytest.mark.parametrize(
        "price, qty, valid",
        [
            ("10", 1, True),
            ("0", 1, True),
            ("10", 0, False),
            ("10", -2, False),
            ("-0.01", 1, False),
            ("NaN", 1, False),
            ("Infinity", 1, False),
            ("-Infinity", 1, False),
        ],
    )
    def test_is_valid(self, price, qty, valid):
        assert LineItem(id="a", name="Widget", unit_price=price, quantity=qty).is_valid is valid

    def test_unparseable_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid unit price"):
            LineItem(id="a", name="Widget", unit_price="cheap", quantity=1)

    def test_float_nan_is_invalid(self):
        item = LineItem(id="a", name="Widget", unit_price=float("nan"), quantity=1)
        assert item.is_valid is False
