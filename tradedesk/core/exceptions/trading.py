"""
Custom exception hierarchy for the trading desk.

This module defines domain-specific exceptions for better error handling.
Ledger errors carry an ``outcome`` tag so the trading session can report
the specific failure kind without inspecting messages.
"""

from tradedesk.core.enums import TradeOutcome


class TradingException(Exception):
    """Base exception for all trading desk errors."""

    pass


class ValidationError(TradingException):
    """Raised when input validation fails."""

    pass


class ConfigurationError(TradingException):
    """Raised when configuration is invalid."""

    pass


class StorageError(TradingException):
    """Raised when a session record cannot be read or written."""

    def __init__(self, session_id: str, reason: str):
        self.session_id = session_id
        self.reason = reason
        super().__init__(f"Session storage failed for {session_id}: {reason}")


class PriceUnavailableError(TradingException):
    """Raised when a price source cannot quote a commodity."""

    def __init__(self, commodity: str, reason: str = "no quote available"):
        self.commodity = commodity
        self.reason = reason
        super().__init__(f"Price unavailable for {commodity}: {reason}")


class LedgerError(TradingException):
    """Raised when a trade cannot be applied to the portfolio ledger."""

    outcome: TradeOutcome = TradeOutcome.INVALID_ARGUMENT


class InvalidArgumentError(LedgerError, ValidationError):
    """Raised when a trade request has a non-positive quantity or price."""

    outcome = TradeOutcome.INVALID_ARGUMENT


class InsufficientCashError(LedgerError):
    """Raised when a buy total exceeds the available cash."""

    outcome = TradeOutcome.INSUFFICIENT_CASH

    def __init__(self, required: float, available: float, operation: str = "operation"):
        self.required = required
        self.available = available
        self.operation = operation
        super().__init__(
            f"Insufficient cash for {operation}: required={required:.2f}, available={available:.2f}"
        )


class NoPositionError(LedgerError):
    """Raised when selling a commodity that is not held."""

    outcome = TradeOutcome.NO_POSITION

    def __init__(self, commodity: str):
        self.commodity = commodity
        super().__init__(f"No position held for commodity: {commodity}")


class InsufficientQuantityError(LedgerError):
    """Raised when a sell quantity exceeds the held quantity."""

    outcome = TradeOutcome.INSUFFICIENT_QUANTITY

    def __init__(self, commodity: str, requested: float, held: float):
        self.commodity = commodity
        self.requested = requested
        self.held = held
        super().__init__(
            f"Insufficient quantity of {commodity}: requested={requested}, held={held}"
        )
