"""
Price alert condition enumerations.
"""

from enum import StrEnum


class AlertCondition(StrEnum):
    """Direction a price has to cross for an alert to trigger."""

    ABOVE = "above"
    BELOW = "below"

    def is_met(self, current_price: float, target_price: float) -> bool:
        """Check whether the current price satisfies this condition."""
        if self == AlertCondition.ABOVE:
            return current_price >= target_price
        return current_price <= target_price
