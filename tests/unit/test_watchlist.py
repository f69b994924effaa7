"""
Unit tests for the watchlist.
"""

import pytest

from tradedesk.core.constants import MAX_WATCHLIST_SIZE
from tradedesk.core.exceptions import InvalidArgumentError, ValidationError
from tradedesk.core.models.watchlist import Watchlist


class TestWatchlist:
    """Test watchlist set semantics."""

    def test_should_keep_insertion_order_without_duplicates(self) -> None:
        # Arrange
        watchlist = Watchlist(["gold", "silver"])

        # Act
        added_again = watchlist.add("gold")
        added_new = watchlist.add("copper")

        # Assert
        assert added_again is False
        assert added_new is True
        assert watchlist.to_list() == ["gold", "silver", "copper"]
        assert list(watchlist) == ["gold", "silver", "copper"]

    def test_should_remove_idempotently(self) -> None:
        watchlist = Watchlist(["gold"])

        assert watchlist.remove("gold") is True
        assert watchlist.remove("gold") is False
        assert len(watchlist) == 0

    def test_should_report_membership(self) -> None:
        watchlist = Watchlist(["crude_oil"])

        assert watchlist.contains("crude_oil")
        assert " crude_oil " in watchlist
        assert not watchlist.contains("gold")
        assert 42 not in watchlist

    def test_should_dedupe_constructor_input(self) -> None:
        assert Watchlist(["gold", "gold", "silver"]).to_list() == ["gold", "silver"]

    def test_should_reject_blank_identifiers(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Watchlist().add("  ")

    def test_should_enforce_size_limit(self) -> None:
        watchlist = Watchlist(f"c{i}" for i in range(MAX_WATCHLIST_SIZE))

        with pytest.raises(ValidationError, match="Maximum watchlist size"):
            watchlist.add("one_more")
        assert watchlist.add("c0") is False
