"""
Portfolio ledger - cash and position state.

This module holds the authoritative in-memory record of cash and positions
and applies trades to it. All validation happens before any mutation, so a
rejected trade leaves the ledger exactly as it was.
"""

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from tradedesk.core.constants import DEFAULT_STARTING_CASH
from tradedesk.core.enums import TradeSide
from tradedesk.core.exceptions import ValidationError
from tradedesk.core.models.position import Position
from tradedesk.core.types.financial import ZERO, calculate_total
from tradedesk.core.utils.validation import validate_non_negative

from .portfolio_helpers import OrderValidator, PositionManager


@dataclass
class PortfolioLedger:
    """Cash balance and per-commodity positions for one session.

    Invariants:
        ``cash >= 0`` after every committed trade, and every stored position
        has a positive quantity.
    """

    initial_cash: float = DEFAULT_STARTING_CASH
    cash: float | None = None
    positions: dict[str, Position] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate starting state."""
        self.initial_cash = validate_non_negative(self.initial_cash, "initial_cash")
        if self.cash is None:
            self.cash = self.initial_cash
        self.cash = validate_non_negative(self.cash, "cash")
        for commodity, position in self.positions.items():
            if commodity != position.commodity:
                raise ValidationError(
                    f"Position key {commodity} does not match commodity {position.commodity}"
                )
            if position.quantity <= ZERO:
                raise ValidationError(f"Position {commodity} must have a positive quantity")

    def apply_trade(
        self, commodity: str, side: TradeSide | str, quantity: float, price: float
    ) -> None:
        """Apply a trade to cash and positions.

        Args:
            commodity: Commodity identifier
            side: "buy" or "sell"
            quantity: Units traded, must be positive
            price: Price per unit, must be positive

        Raises:
            InvalidArgumentError: If arguments are malformed or non-positive
            InsufficientCashError: If a buy costs more than the available cash
            NoPositionError: If a sell targets a commodity not held
            InsufficientQuantityError: If a sell exceeds the held quantity
        """
        commodity, side, quantity, price = OrderValidator.validate_order(
            commodity, side, quantity, price
        )
        if side.is_buy:
            self._buy(commodity, quantity, price)
        else:
            self._sell(commodity, quantity, price)

    def _buy(self, commodity: str, quantity: float, price: float) -> None:
        total = calculate_total(quantity, price)
        OrderValidator.check_sufficient_cash(
            total, self.cash, f"buying {quantity} {commodity} at {price}"
        )

        existing = self.positions.get(commodity)
        if existing is not None:
            OrderValidator.check_finite(quantity=existing.quantity + quantity)
            PositionManager.add_to_position(existing, quantity, total)
        else:
            self.positions[commodity] = PositionManager.open_position(commodity, quantity, price)
        self.cash -= total

        logger.debug(f"Bought {quantity} {commodity} at {price}; cash={self.cash:.2f}")

    def _sell(self, commodity: str, quantity: float, price: float) -> None:
        position = OrderValidator.check_sellable(commodity, quantity, self.positions)
        total = calculate_total(quantity, price)
        OrderValidator.check_finite(total=total, cash=self.cash + total)

        closed = PositionManager.reduce_position(position, quantity)
        if closed:
            del self.positions[commodity]
        self.cash += total

        logger.debug(
            f"Sold {quantity} {commodity} at {price}; cash={self.cash:.2f}"
            + (" (position closed)" if closed else "")
        )

    def get_position(self, commodity: str) -> Position | None:
        """Detached copy of the position for a commodity, if held."""
        position = self.positions.get(commodity)
        return position.snapshot() if position is not None else None

    def position_quantity(self, commodity: str) -> float:
        """Held quantity of a commodity (0 when not held)."""
        position = self.positions.get(commodity)
        return position.quantity if position is not None else ZERO

    def position_list(self) -> list[Position]:
        """Snapshot of all positions in insertion order."""
        return [position.snapshot() for position in self.positions.values()]

    def invested_amount(self) -> float:
        """Cost basis of everything currently held."""
        return sum((position.cost_basis for position in self.positions.values()), ZERO)

    def to_dict(self) -> dict[str, Any]:
        """Convert ledger state to a JSON-compatible dictionary."""
        return {
            "initial_cash": self.initial_cash,
            "cash": self.cash,
            "positions": [position.to_dict() for position in self.positions.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PortfolioLedger":
        """Rebuild a ledger from ``to_dict`` output."""
        try:
            positions = [Position.from_dict(record) for record in data.get("positions", [])]
            return cls(
                initial_cash=float(data["initial_cash"]),
                cash=float(data["cash"]),
                positions={position.commodity: position for position in positions},
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid portfolio record: {e}") from e
