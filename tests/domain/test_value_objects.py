"""Unit tests for domain value coercion and the Product value object."""

from decimal import Decimal

import pytest

from ordering.domain.exceptions import IncorrectItemError
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import as_price, as_quantity


# ── Price ────────────────────────────────────────────────────────────────────


class TestAsPrice:

    def test_decimal_passes_through(self):
        price = Decimal("10.50")
        assert as_price(price) is price

    def test_from_string(self):
        assert as_price("25.99") == Decimal("25.99")

    def test_from_int(self):
        assert as_price(10) == Decimal("10")

    def test_float_uses_its_shortest_repr(self):
        assert as_price(0.1) == Decimal("0.1")
        assert as_price(10.0) == Decimal("10.00")

    def test_negative_kept(self):
        assert as_price(-5.0) == Decimal("-5")

    def test_garbage_rejected(self):
        with pytest.raises(IncorrectItemError, match="Invalid price"):
            as_price("ten")

    def test_bool_rejected(self):
        with pytest.raises(IncorrectItemError, match="Invalid price"):
            as_price(True)

    @pytest.mark.parametrize("value", ["NaN", float("inf"), Decimal("-Infinity")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(IncorrectItemError, match="finite"):
            as_price(value)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestAsQuantity:

    def test_valid_quantity(self):
        assert as_quantity(5) == 5

    def test_sign_not_checked(self):
        assert as_quantity(0) == 0
        assert as_quantity(-3) == -3

    def test_float_rejected(self):
        with pytest.raises(IncorrectItemError, match="must be an integer"):
            as_quantity(2.0)  # type: ignore[arg-type]

    def test_bool_rejected(self):
        with pytest.raises(IncorrectItemError, match="must be an integer"):
            as_quantity(True)


# ── Product ──────────────────────────────────────────────────────────────────


class TestProduct:

    def test_equal_by_value(self):
        assert Product("1", "Widget") == Product("1", "Widget")
        assert Product("1", "Widget") != Product("2", "Widget")

    def test_immutable(self):
        product = Product("1", "Widget")
        with pytest.raises(AttributeError):
            product.name = "Gizmo"  # type: ignore[misc]

    def test_str(self):
        assert str(Product("1", "Widget")) == "Widget"
