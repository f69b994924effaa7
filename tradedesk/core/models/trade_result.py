"""
Tagged result of a trade request.
"""

from dataclasses import dataclass
from typing import Any

from tradedesk.core.enums import TradeOutcome
from tradedesk.core.exceptions import LedgerError
from tradedesk.core.models.trade import Trade


@dataclass(frozen=True)
class TradeResult:
    """Outcome of a trade request: the committed trade, or why it was rejected."""

    outcome: TradeOutcome
    trade: Trade | None = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.outcome.is_success

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def committed(cls, trade: Trade) -> "TradeResult":
        return cls(outcome=TradeOutcome.SUCCESS, trade=trade)

    @classmethod
    def rejected(cls, error: LedgerError) -> "TradeResult":
        return cls(outcome=error.outcome, message=str(error))

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "outcome": self.outcome.value,
            "trade": self.trade.to_dict() if self.trade is not None else None,
            "message": self.message,
        }
