"""
Unit tests for financial helpers.
"""

import pytest

from tradedesk.core.types.financial import (
    calculate_pnl,
    calculate_pnl_percent,
    calculate_total,
    calculate_weighted_average,
    is_effectively_zero,
    round_percentage,
    round_price,
    safe_float_comparison,
)


class TestWeightedAverage:
    """Test weighted-average cost calculation."""

    def test_should_return_purchase_price_for_new_holding(self) -> None:
        """Test the empty-holding case yields the purchase price."""
        assert calculate_weighted_average(0.0, 0.0, 10.0, 1000.0) == 100.0

    def test_should_weight_by_quantity(self) -> None:
        """Test top-up averaging."""
        average = calculate_weighted_average(10.0, 100.0, 5.0, 1000.0)

        assert average == pytest.approx(133.3333333)

    def test_should_reject_non_positive_result(self) -> None:
        """Test a zero resulting quantity is an error."""
        with pytest.raises(ValueError, match="must be positive"):
            calculate_weighted_average(0.0, 0.0, 0.0, 0.0)


class TestPnl:
    """Test PnL helpers."""

    def test_should_compute_long_pnl(self) -> None:
        """Test absolute and relative PnL."""
        assert calculate_pnl(100.0, 120.0, 5.0) == 100.0
        assert calculate_pnl_percent(100.0, 120.0) == pytest.approx(20.0)

    def test_should_return_zero_percent_without_cost_basis(self) -> None:
        """Test zero average price does not divide by zero."""
        assert calculate_pnl_percent(0.0, 50.0) == 0.0


class TestHelpers:
    """Test rounding and comparison helpers."""

    def test_should_round_for_display(self) -> None:
        assert round_price(133.33333) == 133.33
        assert round_percentage(12.345678) == 12.3457

    def test_should_compute_total(self) -> None:
        assert calculate_total(15, 150) == 2250

    def test_should_detect_float_dust(self) -> None:
        """Test dust detection around zero."""
        assert is_effectively_zero(0.3 - (0.1 + 0.2))
        assert not is_effectively_zero(0.001)
        assert safe_float_comparison(0.1 + 0.2, 0.3)
