"""Helper methods for the portfolio ledger to keep trade application small."""

import math
from datetime import UTC, datetime

from tradedesk.core.enums import TradeSide
from tradedesk.core.exceptions import (
    InsufficientCashError,
    InsufficientQuantityError,
    InvalidArgumentError,
    NoPositionError,
)
from tradedesk.core.models.position import Position
from tradedesk.core.models.trade import Trade
from tradedesk.core.types.financial import (
    calculate_total,
    calculate_weighted_average,
    is_effectively_zero,
)
from tradedesk.core.utils.validation import (
    validate_commodity,
    validate_positive,
    validate_side,
)


class OrderValidator:
    """Validates trade requests against ledger state.

    Every check runs before the ledger is touched, so a rejected request
    leaves cash and positions unchanged.
    """

    @staticmethod
    def validate_order(
        commodity: str, side: TradeSide | str, quantity: float, price: float
    ) -> tuple[str, TradeSide, float, float]:
        """Validate and return normalized order parameters.

        Raises:
            InvalidArgumentError: If any parameter is malformed or non-positive
        """
        commodity = validate_commodity(commodity)
        side = validate_side(side)
        price = validate_positive(price, "price")
        quantity = validate_positive(quantity, "quantity")
        return commodity, side, quantity, price

    @staticmethod
    def check_sufficient_cash(total: float, available: float, operation: str) -> None:
        """Check if the buy total is covered by available cash.

        Raises:
            InsufficientCashError: If total exceeds available cash
        """
        if total > available:
            raise InsufficientCashError(required=total, available=available, operation=operation)

    @staticmethod
    def check_finite(**amounts: float) -> None:
        """Check that amounts computed from an order did not overflow.

        Raises:
            InvalidArgumentError: If any amount is infinite or NaN
        """
        for name, amount in amounts.items():
            if not math.isfinite(amount):
                raise InvalidArgumentError(f"{name} out of range: {amount}")

    @staticmethod
    def check_sellable(commodity: str, quantity: float, positions: dict[str, Position]) -> Position:
        """Check a sell can be covered by the held quantity.

        Returns:
            The position the sell draws from

        Raises:
            NoPositionError: If the commodity is not held
            InsufficientQuantityError: If more is sold than held
        """
        position = positions.get(commodity)
        if position is None:
            raise NoPositionError(commodity)
        if quantity > position.quantity:
            raise InsufficientQuantityError(commodity, requested=quantity, held=position.quantity)
        return position


class PositionManager:
    """Manages position lifecycle."""

    @staticmethod
    def open_position(commodity: str, quantity: float, price: float) -> Position:
        """Create a new position; its average price is the purchase price."""
        return Position(
            commodity=commodity,
            quantity=quantity,
            average_price=calculate_weighted_average(0.0, 0.0, quantity, quantity * price),
        )

    @staticmethod
    def add_to_position(position: Position, quantity: float, total: float) -> None:
        """Grow a position and recompute its weighted-average cost."""
        position.average_price = calculate_weighted_average(
            position.quantity, position.average_price, quantity, total
        )
        position.quantity += quantity

    @staticmethod
    def reduce_position(position: Position, quantity: float) -> bool:
        """Shrink a position; the average cost of the remainder is unchanged.

        Returns:
            True if the position is now fully closed
        """
        remaining = position.quantity - quantity
        if is_effectively_zero(remaining):
            position.quantity = 0.0
            return True
        position.quantity = remaining
        return False


class TradeRecorder:
    """Builds trade records for committed ledger changes."""

    @staticmethod
    def create_trade(
        trade_id: int,
        commodity: str,
        side: TradeSide,
        quantity: float,
        price: float,
        timestamp: datetime | None = None,
    ) -> Trade:
        """Create a trade record stamped with the current UTC time."""
        return Trade(
            id=trade_id,
            commodity=commodity,
            side=side,
            price=price,
            quantity=quantity,
            total=calculate_total(quantity, price),
            timestamp=timestamp or datetime.now(UTC),
        )
