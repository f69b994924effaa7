"""
Unit tests for portfolio valuation.
"""

import pytest

from tradedesk.core.models.portfolio_ledger import PortfolioLedger
from tradedesk.core.models.portfolio_metrics import POSITION_COLUMNS, PortfolioMetrics


@pytest.fixture
def ledger() -> PortfolioLedger:
    ledger = PortfolioLedger(initial_cash=10000.0)
    ledger.apply_trade("gold", "buy", 10, 100)
    ledger.apply_trade("silver", "buy", 20, 50)
    return ledger


class TestPortfolioMetrics:
    """Test valuation against a price map."""

    def test_should_value_holdings_at_current_prices(self, ledger: PortfolioLedger) -> None:
        # Arrange
        metrics = PortfolioMetrics(ledger)
        prices = {"gold": 120.0, "silver": 40.0}

        # Act
        holdings = metrics.holdings_value(prices)
        total = metrics.total_value(prices)
        pnl = metrics.unrealized_pnl(prices)

        # Assert
        assert holdings == 1200.0 + 800.0
        assert total == 8000.0 + 2000.0
        assert pnl == 200.0 - 200.0
        assert metrics.total_return_percent(prices) == 0.0

    def test_should_fall_back_to_average_price(self, ledger: PortfolioLedger) -> None:
        """Test missing and non-positive quotes value a position at cost."""
        metrics = PortfolioMetrics(ledger)

        value = metrics.holdings_value({"gold": 0.0})

        assert value == 1000.0 + 1000.0
        assert metrics.unrealized_pnl({}) == 0.0

    def test_should_build_summary(self, ledger: PortfolioLedger) -> None:
        metrics = PortfolioMetrics(ledger)

        summary = metrics.summary({"gold": 150.0})

        assert summary["cash"] == 8000.0
        assert summary["invested"] == 2000.0
        assert summary["total_value"] == 8000.0 + 1500.0 + 1000.0
        assert summary["unrealized_pnl"] == 500.0
        assert summary["total_return_percent"] == 5.0
        rows = {row["commodity"]: row for row in summary["positions"]}
        assert rows["gold"]["priced"] is True
        assert rows["gold"]["unrealized_pnl_percent"] == 50.0
        assert rows["silver"]["priced"] is False
        assert rows["silver"]["current_price"] == 50.0

    def test_should_not_mutate_ledger(self, ledger: PortfolioLedger) -> None:
        before = ledger.to_dict()

        PortfolioMetrics(ledger).summary({"gold": 1.0, "silver": 1.0})

        assert ledger.to_dict() == before

    def test_should_export_frame(self, ledger: PortfolioLedger) -> None:
        frame = PortfolioMetrics(ledger).to_frame({"gold": 110.0, "silver": 55.0})

        assert list(frame.columns) == POSITION_COLUMNS
        assert frame["market_value"].tolist() == [1100.0, 1100.0]

    def test_should_handle_zero_starting_cash(self) -> None:
        metrics = PortfolioMetrics(PortfolioLedger(initial_cash=0.0))

        assert metrics.total_return_percent({}) == 0.0
        assert metrics.summary({})["positions"] == []
