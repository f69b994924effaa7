"""
Watchlist - a set of commodity identifiers the user follows.

Membership is independent of trading; nothing here is validated against
the portfolio.
"""

from collections.abc import Iterable, Iterator

from tradedesk.core.constants import MAX_WATCHLIST_SIZE
from tradedesk.core.exceptions import ValidationError
from tradedesk.core.utils.validation import validate_commodity


class Watchlist:
    """Insertion-ordered set of commodity identifiers."""

    def __init__(self, commodities: Iterable[str] = ()) -> None:
        self._items: dict[str, None] = {}
        for commodity in commodities:
            self.add(commodity)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, commodity: object) -> bool:
        return isinstance(commodity, str) and commodity.strip() in self._items

    def add(self, commodity: str) -> bool:
        """Add a commodity; no-op if already present.

        Returns:
            True if the watchlist changed
        """
        identifier = validate_commodity(commodity)
        if identifier in self._items:
            return False
        if len(self._items) >= MAX_WATCHLIST_SIZE:
            raise ValidationError(f"Maximum watchlist size reached ({MAX_WATCHLIST_SIZE})")
        self._items[identifier] = None
        return True

    def remove(self, commodity: str) -> bool:
        """Remove a commodity; no-op if absent.

        Returns:
            True if the watchlist changed
        """
        identifier = validate_commodity(commodity)
        if identifier not in self._items:
            return False
        del self._items[identifier]
        return True

    def contains(self, commodity: str) -> bool:
        return commodity in self

    def to_list(self) -> list[str]:
        return list(self._items)
