"""
Unit tests for session stores.
"""

import json
from pathlib import Path

import pytest

from tradedesk.core.exceptions import StorageError
from tradedesk.core.models import TradingSession
from tradedesk.infrastructure.storage import InMemorySessionStore, JsonFileSessionStore


class TestInMemorySessionStore:
    """Test the in-memory store."""

    def test_should_return_none_for_unknown_session(self) -> None:
        assert InMemorySessionStore().load("missing") is None

    def test_should_copy_records(self) -> None:
        """Test stored records are isolated from caller mutations."""
        store = InMemorySessionStore()
        record = {"watchlist": ["gold"]}

        store.save("a", record)
        record["watchlist"].append("silver")
        loaded = store.load("a")
        assert loaded is not None
        loaded["watchlist"].append("zinc")

        assert store.load("a") == {"watchlist": ["gold"]}

    def test_should_delete_and_list_sessions(self) -> None:
        store = InMemorySessionStore()
        store.save("b", {})
        store.save("a", {})

        assert store.session_ids() == ["a", "b"]
        assert store.delete("a") is True
        assert store.delete("a") is False
        assert store.session_ids() == ["b"]


class TestJsonFileSessionStore:
    """Test the JSON file store."""

    def test_should_write_one_file_per_session(self, tmp_path: Path) -> None:
        # Arrange
        store = JsonFileSessionStore(tmp_path / "sessions")

        # Act
        store.save("alice", {"version": 1, "cash": 10.5})

        # Assert
        path = tmp_path / "sessions" / "alice.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"version": 1, "cash": 10.5}
        assert store.load("alice") == {"version": 1, "cash": 10.5}
        assert list((tmp_path / "sessions").glob("*.tmp")) == []

    def test_should_not_create_directory_until_first_save(self, tmp_path: Path) -> None:
        store = JsonFileSessionStore(tmp_path / "lazy")

        assert store.load("nobody") is None
        assert not (tmp_path / "lazy").exists()

    def test_should_replace_existing_record(self, tmp_path: Path) -> None:
        store = JsonFileSessionStore(tmp_path)
        store.save("a", {"n": 1})

        store.save("a", {"n": 2})

        assert store.load("a") == {"n": 2}

    def test_should_raise_on_corrupt_file(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError, match="unreadable session file"):
            JsonFileSessionStore(tmp_path).load("bad")

    def test_should_raise_on_non_object_file(self, tmp_path: Path) -> None:
        (tmp_path / "list.json").write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(StorageError, match="does not contain an object"):
            JsonFileSessionStore(tmp_path).load("list")

    def test_should_reject_path_traversal(self, tmp_path: Path) -> None:
        with pytest.raises(StorageError, match="Invalid session id"):
            JsonFileSessionStore(tmp_path).save("../outside", {})

    def test_should_reject_unserializable_record(self, tmp_path: Path) -> None:
        store = JsonFileSessionStore(tmp_path)

        with pytest.raises(StorageError, match="write failed"):
            store.save("a", {"bad": object()})

        assert store.load("a") is None
        assert list(tmp_path.iterdir()) == []

    def test_should_delete_and_list_sessions(self, tmp_path: Path) -> None:
        store = JsonFileSessionStore(tmp_path)
        store.save("one", {})
        store.save("two", {})

        assert store.session_ids() == ["one", "two"]
        assert store.delete("one") is True
        assert store.delete("one") is False
        assert store.session_ids() == ["two"]

    def test_should_round_trip_trading_session(self, tmp_path: Path) -> None:
        """Test a full session survives a reload from disk."""
        store = JsonFileSessionStore(tmp_path)
        session = TradingSession.load("carol", store)
        assert session.execute_trade("gold", "buy", 1, 94760.0)
        session.set_price_alert("gold", 99000.0)

        restored = TradingSession.load("carol", JsonFileSessionStore(tmp_path))

        assert restored.to_record() == session.to_record()
