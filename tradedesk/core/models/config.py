"""
Session configuration model.
"""

from dataclasses import dataclass, field
from typing import Any

from tradedesk.core.constants import (
    DEFAULT_STARTING_CASH,
    DEFAULT_WATCHLIST,
    MAX_STARTING_CASH,
    MIN_STARTING_CASH,
)
from tradedesk.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SessionConfig:
    """Defaults applied when a trading session starts without a stored record."""

    starting_cash: float = DEFAULT_STARTING_CASH
    default_watchlist: tuple[str, ...] = field(default=DEFAULT_WATCHLIST)
    autosave: bool = True

    def __post_init__(self) -> None:
        if not self.is_valid_cash():
            raise ConfigurationError(
                f"starting_cash must be between {MIN_STARTING_CASH} and {MAX_STARTING_CASH}, "
                f"got {self.starting_cash}"
            )

    def is_valid_cash(self) -> bool:
        """Validate starting cash is within the allowed range."""
        return MIN_STARTING_CASH <= self.starting_cash <= MAX_STARTING_CASH

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "starting_cash": self.starting_cash,
            "default_watchlist": list(self.default_watchlist),
            "autosave": self.autosave,
        }
