"""
Portfolio metrics and valuation.

This module values a ledger snapshot against a price map. A commodity with
no usable quote is valued at its average acquisition cost, the same fallback
the dashboard uses when the price feed fails. Reads never mutate the ledger.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import pandas as pd

from tradedesk.core.models.position import Position
from tradedesk.core.types.financial import (
    ZERO,
    round_amount,
    round_percentage,
    round_price,
)

if TYPE_CHECKING:
    from .portfolio_ledger import PortfolioLedger

POSITION_COLUMNS = [
    "commodity",
    "quantity",
    "average_price",
    "current_price",
    "market_value",
    "unrealized_pnl",
    "unrealized_pnl_percent",
    "priced",
]


class PortfolioMetrics:
    """Portfolio valuation and PnL calculations."""

    def __init__(self, ledger: "PortfolioLedger") -> None:
        """Initialize with the ledger to value.

        Args:
            ledger: The portfolio ledger to calculate metrics for
        """
        self.ledger = ledger

    @staticmethod
    def resolve_price(position: Position, current_prices: Mapping[str, float]) -> float:
        """Current price for a position, falling back to its average cost."""
        price = current_prices.get(position.commodity)
        if price is None or price <= ZERO:
            return position.average_price
        return price

    def position_value(self, position: Position, current_prices: Mapping[str, float]) -> float:
        """Market value of one position."""
        return position.market_value(self.resolve_price(position, current_prices))

    def unrealized_pnl(self, current_prices: Mapping[str, float]) -> float:
        """Total unrealized PnL across all positions."""
        return sum(
            (
                position.unrealized_pnl(self.resolve_price(position, current_prices))
                for position in self.ledger.positions.values()
            ),
            ZERO,
        )

    def holdings_value(self, current_prices: Mapping[str, float]) -> float:
        """Market value of all positions."""
        return sum(
            (
                self.position_value(position, current_prices)
                for position in self.ledger.positions.values()
            ),
            ZERO,
        )

    def total_value(self, current_prices: Mapping[str, float]) -> float:
        """Cash plus the market value of all positions."""
        return self.ledger.cash + self.holdings_value(current_prices)

    def total_return_percent(self, current_prices: Mapping[str, float]) -> float:
        """Change in total value relative to the starting cash, in percent."""
        if self.ledger.initial_cash <= ZERO:
            return ZERO
        return (
            (self.total_value(current_prices) - self.ledger.initial_cash)
            / self.ledger.initial_cash
            * 100
        )

    def position_rows(self, current_prices: Mapping[str, float]) -> list[dict[str, Any]]:
        """Per-position valuation rows for display."""
        rows = []
        for position in self.ledger.positions.values():
            current_price = self.resolve_price(position, current_prices)
            rows.append(
                {
                    "commodity": position.commodity,
                    "quantity": position.quantity,
                    "average_price": round_price(position.average_price),
                    "current_price": round_price(current_price),
                    "market_value": round_amount(position.market_value(current_price)),
                    "unrealized_pnl": round_amount(position.unrealized_pnl(current_price)),
                    "unrealized_pnl_percent": round_percentage(
                        position.unrealized_pnl_percent(current_price)
                    ),
                    "priced": (current_prices.get(position.commodity) or ZERO) > ZERO,
                }
            )
        return rows

    def summary(self, current_prices: Mapping[str, float]) -> dict[str, Any]:
        """Portfolio summary: cash, valuation and per-position rows."""
        return {
            "cash": round_amount(self.ledger.cash),
            "initial_cash": round_amount(self.ledger.initial_cash),
            "invested": round_amount(self.ledger.invested_amount()),
            "holdings_value": round_amount(self.holdings_value(current_prices)),
            "total_value": round_amount(self.total_value(current_prices)),
            "unrealized_pnl": round_amount(self.unrealized_pnl(current_prices)),
            "total_return_percent": round_percentage(self.total_return_percent(current_prices)),
            "positions": self.position_rows(current_prices),
        }

    def to_frame(self, current_prices: Mapping[str, float]) -> pd.DataFrame:
        """Per-position valuation as a DataFrame."""
        return pd.DataFrame(self.position_rows(current_prices), columns=POSITION_COLUMNS)
