"""
In-memory session store.

Records are deep-copied on the way in and out so callers never share
mutable state with the store.
"""

import copy
from typing import Any

from loguru import logger

from tradedesk.core.interfaces.storage import ISessionStore


class InMemorySessionStore(ISessionStore):
    """Process-local session store, mainly for tests and ephemeral servers."""

    def __init__(self) -> None:
        self._records: dict[str, dict[str, Any]] = {}

    def load(self, session_id: str) -> dict[str, Any] | None:
        record = self._records.get(session_id)
        return copy.deepcopy(record) if record is not None else None

    def save(self, session_id: str, record: dict[str, Any]) -> None:
        self._records[session_id] = copy.deepcopy(record)
        logger.debug(f"Saved session {session_id} in memory")

    def delete(self, session_id: str) -> bool:
        return self._records.pop(session_id, None) is not None

    def session_ids(self) -> list[str]:
        return sorted(self._records)
