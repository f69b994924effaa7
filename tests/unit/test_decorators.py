"""
Unit tests for utility decorators.
Testing trade logging with correlation ids and outcome reporting.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger

from tradedesk.core.enums import TradeOutcome, TradeSide
from tradedesk.core.models.trade_result import TradeResult
from tradedesk.core.utils.decorators import log_trades


@pytest.fixture
def records() -> Iterator[list[dict[str, Any]]]:
    """Capture loguru records emitted during a test."""
    captured: list[dict[str, Any]] = []
    sink_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(sink_id)


class TestLogTradesDecorator:
    """Test suite for @log_trades decorator."""

    def test_should_log_start_and_completion(self, records: list[dict[str, Any]]) -> None:
        """Test entry and completion lines share a correlation id."""

        @log_trades
        def place(commodity: str, side: TradeSide, quantity: float, price: float) -> bool:
            return True

        # Act
        result = place("gold", TradeSide.BUY, 1.5, 100.0)

        # Assert
        assert result is True
        messages = [record["message"] for record in records]
        assert "Trading operation started: place" in messages
        assert "Trading operation completed: place" in messages
        started, completed = records[0]["extra"], records[-1]["extra"]
        assert started["correlation_id"] == completed["correlation_id"]
        assert started["commodity"] == "gold"
        assert started["side"] == "buy"
        assert started["quantity"] == 1.5
        assert completed["result"] is True
        assert "execution_time_ms" in completed

    def test_should_report_result_outcome(self, records: list[dict[str, Any]]) -> None:
        """Test tagged results are logged by outcome."""

        @log_trades
        def place(commodity: str) -> TradeResult:
            return TradeResult(outcome=TradeOutcome.NO_POSITION, message="none")

        place("gold")

        assert records[-1]["extra"]["result"] == "no_position"

    def test_should_log_and_reraise_errors(self, records: list[dict[str, Any]]) -> None:
        """Test exceptions propagate after being logged."""

        @log_trades
        def place(commodity: str) -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            place("gold")

        failure = records[-1]
        assert failure["level"].name == "ERROR"
        assert failure["extra"]["error_type"] == "RuntimeError"

    def test_should_preserve_function_metadata(self) -> None:
        @log_trades
        def place(commodity: str) -> None:
            """Place an order."""

        assert place.__name__ == "place"
        assert place.__doc__ == "Place an order."

    def test_should_ignore_unlogged_parameters(self, records: list[dict[str, Any]]) -> None:
        @log_trades
        def place(commodity: str, note: str = "") -> None:
            return None

        place("gold", note="secret")

        assert "note" not in records[0]["extra"]
        assert records[-1]["extra"]["result_type"] == "NoneType"
