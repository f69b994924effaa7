"""
Unit tests for the exception hierarchy.
"""

import pytest

from tradedesk.core.enums import TradeOutcome
from tradedesk.core.exceptions import (
    ConfigurationError,
    InsufficientCashError,
    InsufficientQuantityError,
    InvalidArgumentError,
    LedgerError,
    NoPositionError,
    PriceUnavailableError,
    StorageError,
    TradingException,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance."""

    @pytest.mark.parametrize(
        "exc_class",
        [ValidationError, ConfigurationError, StorageError, PriceUnavailableError, LedgerError],
    )
    def test_should_derive_from_trading_exception(self, exc_class: type) -> None:
        """Test every domain error shares the base class."""
        assert issubclass(exc_class, TradingException)

    def test_should_treat_invalid_argument_as_validation_error(self) -> None:
        """Test InvalidArgumentError is both a ledger and a validation error."""
        assert issubclass(InvalidArgumentError, LedgerError)
        assert issubclass(InvalidArgumentError, ValidationError)


class TestLedgerErrors:
    """Test ledger error attributes and outcome tags."""

    def test_should_carry_cash_details(self) -> None:
        """Test InsufficientCashError fields and message."""
        error = InsufficientCashError(required=1500.0, available=1000.0, operation="buying gold")

        assert error.required == 1500.0
        assert error.available == 1000.0
        assert error.outcome == TradeOutcome.INSUFFICIENT_CASH
        assert str(error) == (
            "Insufficient cash for buying gold: required=1500.00, available=1000.00"
        )

    def test_should_carry_position_details(self) -> None:
        """Test NoPositionError and InsufficientQuantityError fields."""
        no_position = NoPositionError("silver")
        short = InsufficientQuantityError("silver", requested=5.0, held=2.0)

        assert no_position.commodity == "silver"
        assert no_position.outcome == TradeOutcome.NO_POSITION
        assert short.requested == 5.0
        assert short.held == 2.0
        assert short.outcome == TradeOutcome.INSUFFICIENT_QUANTITY

    def test_should_tag_invalid_arguments(self) -> None:
        """Test InvalidArgumentError outcome tag."""
        assert InvalidArgumentError("bad").outcome == TradeOutcome.INVALID_ARGUMENT


class TestInfrastructureErrors:
    """Test storage and price errors."""

    def test_should_describe_storage_failure(self) -> None:
        """Test StorageError keeps session id and reason."""
        error = StorageError("alice", "disk full")

        assert error.session_id == "alice"
        assert error.reason == "disk full"
        assert "alice" in str(error)

    def test_should_describe_missing_price(self) -> None:
        """Test PriceUnavailableError default reason."""
        error = PriceUnavailableError("gold")

        assert error.commodity == "gold"
        assert str(error) == "Price unavailable for gold: no quote available"
