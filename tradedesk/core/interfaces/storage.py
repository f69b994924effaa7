"""
Session storage interface.

Stores are plain key-value mappings from session id to a JSON-compatible
session record. Schema evolution is left to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any


class ISessionStore(ABC):
    """Abstract interface for session persistence."""

    @abstractmethod
    def load(self, session_id: str) -> dict[str, Any] | None:
        """Return the stored record, or None if the session is unknown."""

    @abstractmethod
    def save(self, session_id: str, record: dict[str, Any]) -> None:
        """Store the record, replacing any previous one."""

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Remove a stored record; returns True if one existed."""

    @abstractmethod
    def session_ids(self) -> list[str]:
        """Ids of all stored sessions."""
