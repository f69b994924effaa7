"""
Trade log - append-only history of executed trades.

Trades are kept most-recent-first, the order dashboards display them in.
The log also owns trade id allocation so ids stay monotonic across reloads.
"""

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

import pandas as pd

from tradedesk.core.exceptions import ValidationError
from tradedesk.core.models.trade import Trade

TRADE_COLUMNS = ["id", "timestamp", "commodity", "side", "quantity", "price", "total"]


class TradeLog:
    """Ordered, append-only record of trades (newest first)."""

    def __init__(self, trades: Iterable[Trade] | None = None, next_trade_id: int = 1) -> None:
        self._trades: deque[Trade] = deque(trades or ())
        highest_id = max((trade.id for trade in self._trades), default=0)
        self._next_id = max(next_trade_id, highest_id + 1)

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(list(self._trades))

    def next_id(self) -> int:
        """Allocate the id for the next trade."""
        trade_id = self._next_id
        self._next_id += 1
        return trade_id

    @property
    def peek_next_id(self) -> int:
        """Id the next allocation will return."""
        return self._next_id

    def append(self, trade: Trade) -> None:
        """Add a trade to the front of the log.

        Raises:
            ValidationError: If the trade id does not come after the newest trade
        """
        if self._trades and trade.id <= self._trades[0].id:
            raise ValidationError(
                f"Trade id {trade.id} must be greater than latest id {self._trades[0].id}"
            )
        self._trades.appendleft(trade)
        self._next_id = max(self._next_id, trade.id + 1)

    def all(self) -> list[Trade]:
        """Full history, most recent first."""
        return list(self._trades)

    def latest(self) -> Trade | None:
        """Most recently executed trade, if any."""
        return self._trades[0] if self._trades else None

    def for_commodity(self, commodity: str) -> list[Trade]:
        """History filtered to a single commodity, most recent first."""
        return [trade for trade in self._trades if trade.commodity == commodity]

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame, most recent first."""
        if not self._trades:
            return pd.DataFrame(columns=TRADE_COLUMNS)
        frame = pd.DataFrame([trade.to_dict() for trade in self._trades], columns=TRADE_COLUMNS)
        frame["timestamp"] = pd.to_datetime(frame["timestamp"], utc=True)
        return frame

    def to_records(self) -> list[dict[str, Any]]:
        """JSON-compatible records, most recent first."""
        return [trade.to_dict() for trade in self._trades]

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]], next_trade_id: int = 1) -> "TradeLog":
        """Rebuild a log from ``to_records`` output."""
        trades = sorted((Trade.from_dict(record) for record in records), key=lambda t: -t.id)
        return cls(trades, next_trade_id=next_trade_id)
