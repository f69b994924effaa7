"""
Trade side and outcome enumerations.

This module defines the allowed trade sides and the tagged outcomes a
trade request can resolve to.
"""

from enum import StrEnum


class TradeSide(StrEnum):
    """
    Allowed trade sides.

    A buy spends cash and grows a position; a sell releases quantity for cash.
    """

    BUY = "buy"
    SELL = "sell"

    @property
    def is_buy(self) -> bool:
        """Check if side is a buy."""
        return self == TradeSide.BUY

    @property
    def is_sell(self) -> bool:
        """Check if side is a sell."""
        return self == TradeSide.SELL

    def cash_sign(self) -> int:
        """Direction of the cash movement caused by this side."""
        return -1 if self.is_buy else 1

    @classmethod
    def from_string(cls, value: str) -> "TradeSide":
        """
        Convert string to TradeSide enum, with case-insensitive matching.

        Args:
            value: String representation of the side

        Returns:
            Corresponding TradeSide enum value

        Raises:
            ValueError: If side is not supported
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unsupported trade side: {value}. "
                f"Supported sides: {', '.join([s.value for s in cls])}"
            ) from None


class TradeOutcome(StrEnum):
    """
    Tagged outcome of a trade request.

    Every outcome other than SUCCESS corresponds to one ledger error kind.
    """

    SUCCESS = "success"
    INSUFFICIENT_CASH = "insufficient_cash"
    NO_POSITION = "no_position"
    INSUFFICIENT_QUANTITY = "insufficient_quantity"
    INVALID_ARGUMENT = "invalid_argument"

    @property
    def is_success(self) -> bool:
        """Check if the outcome is a committed trade."""
        return self == TradeOutcome.SUCCESS
