"""
JSON file session store.

One file per session under a base directory. Writes go to a temporary file
that replaces the target, so a crash mid-write never leaves a truncated
record behind.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from loguru import logger

from tradedesk.core.exceptions import InvalidArgumentError, StorageError
from tradedesk.core.interfaces.storage import ISessionStore
from tradedesk.core.utils.validation import validate_session_id


class JsonFileSessionStore(ISessionStore):
    """Stores each session record as ``<base_dir>/<session_id>.json``."""

    def __init__(self, base_dir: str | Path) -> None:
        self.base_dir = Path(base_dir)

    def _path_for(self, session_id: str) -> Path:
        try:
            validate_session_id(session_id)
        except InvalidArgumentError as e:
            raise StorageError(session_id, str(e)) from e
        return self.base_dir / f"{session_id}.json"

    def load(self, session_id: str) -> dict[str, Any] | None:
        path = self._path_for(session_id)
        if not path.exists():
            return None
        try:
            with path.open(encoding="utf-8") as f:
                record = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read session file {path}: {e}")
            raise StorageError(session_id, f"unreadable session file: {e}") from e
        if not isinstance(record, dict):
            raise StorageError(session_id, "session file does not contain an object")
        return record

    def save(self, session_id: str, record: dict[str, Any]) -> None:
        path = self._path_for(session_id)
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(session_id, f"cannot create {self.base_dir}: {e}") from e
        fd, tmp_name = tempfile.mkstemp(dir=self.base_dir, prefix=f".{session_id}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(record, f, indent=2)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            Path(tmp_name).unlink(missing_ok=True)
            logger.error(f"Failed to write session file {path}: {e}")
            raise StorageError(session_id, f"write failed: {e}") from e
        logger.debug(f"Saved session {session_id} to {path}")

    def delete(self, session_id: str) -> bool:
        path = self._path_for(session_id)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(session_id, f"delete failed: {e}") from e
        return True

    def session_ids(self) -> list[str]:
        return sorted(path.stem for path in self.base_dir.glob("*.json"))
