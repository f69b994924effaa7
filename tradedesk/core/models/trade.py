"""
Trade domain model.

Trades are immutable records of executed transactions.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from tradedesk.core.enums import TradeSide
from tradedesk.core.exceptions import ValidationError
from tradedesk.core.types.financial import safe_float_comparison


@dataclass(frozen=True)
class Trade:
    """Represents an executed trade."""

    id: int
    commodity: str
    side: TradeSide
    price: float
    quantity: float
    total: float
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate trade data after initialization."""
        if self.id <= 0:
            raise ValidationError(f"Trade id must be positive, got {self.id}")
        if self.quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got {self.quantity}")
        if self.price <= 0:
            raise ValidationError(f"Price must be positive, got {self.price}")
        if not safe_float_comparison(
            self.total, self.price * self.quantity, tolerance=1e-6 * max(1.0, abs(self.total))
        ):
            raise ValidationError(
                f"Total {self.total} does not match price * quantity "
                f"({self.price} * {self.quantity})"
            )

    @property
    def cash_delta(self) -> float:
        """Signed change in cash caused by this trade."""
        return self.side.cash_sign() * self.total

    def to_dict(self) -> dict[str, Any]:
        """Convert trade to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "commodity": self.commodity,
            "side": self.side.value,
            "price": self.price,
            "quantity": self.quantity,
            "total": self.total,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Trade":
        """Rebuild a trade from ``to_dict`` output."""
        try:
            timestamp = datetime.fromisoformat(data["timestamp"])
            if timestamp.tzinfo is None:
                timestamp = timestamp.replace(tzinfo=UTC)
            return cls(
                id=int(data["id"]),
                commodity=str(data["commodity"]),
                side=TradeSide(data["side"]),
                price=float(data["price"]),
                quantity=float(data["quantity"]),
                total=float(data["total"]),
                timestamp=timestamp,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid trade record: {e}") from e
