"""
Position domain model.

A position is the held quantity of one commodity plus its weighted-average
acquisition cost. Positions only ever represent long holdings.
"""

from dataclasses import dataclass
from typing import Any

from tradedesk.core.exceptions import ValidationError
from tradedesk.core.types.financial import ZERO, calculate_pnl, calculate_pnl_percent


@dataclass
class Position:
    """Represents a holding of one commodity."""

    commodity: str
    quantity: float
    average_price: float

    def __post_init__(self) -> None:
        """Validate position data after initialization."""
        if not self.commodity:
            raise ValidationError("Position commodity must not be empty")
        if self.quantity < ZERO:
            raise ValidationError(f"Quantity must be non-negative, got {self.quantity}")
        if self.average_price < ZERO:
            raise ValidationError(
                f"Average price must be non-negative, got {self.average_price}"
            )

    @property
    def cost_basis(self) -> float:
        """Cash spent on the currently held quantity."""
        return self.quantity * self.average_price

    def market_value(self, current_price: float) -> float:
        """Value of the holding at the given price."""
        return self.quantity * current_price

    def unrealized_pnl(self, current_price: float) -> float:
        """Calculate unrealized PnL at the given price.

        Args:
            current_price: Current market price

        Returns:
            Unrealized PnL as float
        """
        if self.quantity == ZERO:
            return ZERO
        return calculate_pnl(self.average_price, current_price, self.quantity)

    def unrealized_pnl_percent(self, current_price: float) -> float:
        """Unrealized PnL relative to cost basis, in percent."""
        return calculate_pnl_percent(self.average_price, current_price)

    def snapshot(self) -> "Position":
        """Detached copy safe to hand out to readers."""
        return Position(
            commodity=self.commodity,
            quantity=self.quantity,
            average_price=self.average_price,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert position to a JSON-compatible dictionary."""
        return {
            "commodity": self.commodity,
            "quantity": self.quantity,
            "average_price": self.average_price,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Position":
        """Rebuild a position from ``to_dict`` output."""
        try:
            return cls(
                commodity=str(data["commodity"]),
                quantity=float(data["quantity"]),
                average_price=float(data["average_price"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid position record: {e}") from e
