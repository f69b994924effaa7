"""
Shared FastAPI dependencies.

Sessions are loaded from the configured store on first use and kept in a
registry for the lifetime of the application. Every mutation is saved back
by the session itself.
"""

from threading import Lock

from fastapi import Depends, Request

from tradedesk.core.interfaces.price_source import IPriceSource
from tradedesk.core.interfaces.storage import ISessionStore
from tradedesk.core.models import SessionConfig, TradingSession
from tradedesk.core.utils.validation import validate_session_id
from tradedesk.infrastructure.storage import InMemorySessionStore, JsonFileSessionStore

from .settings import Settings, StorageBackend


def build_store(settings: Settings) -> ISessionStore:
    """Create the session store selected in settings."""
    if settings.storage_backend == StorageBackend.MEMORY:
        return InMemorySessionStore()
    return JsonFileSessionStore(settings.session_dir)


class SessionRegistry:
    """Loaded trading sessions keyed by session id."""

    def __init__(self, store: ISessionStore, config: SessionConfig | None = None) -> None:
        self.store = store
        self.config = config or SessionConfig()
        self._sessions: dict[str, TradingSession] = {}
        self._lock = Lock()

    def get(self, session_id: str) -> TradingSession:
        """Return the session, loading or creating it on first access."""
        session_id = validate_session_id(session_id)
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = TradingSession.load(session_id, self.store, self.config)
                self._sessions[session_id] = session
            return session

    def evict(self, session_id: str) -> None:
        """Forget a loaded session; the next access reloads it from the store."""
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.registry


def get_price_source(request: Request) -> IPriceSource:
    return request.app.state.price_source


def get_session(
    session_id: str, registry: SessionRegistry = Depends(get_registry)
) -> TradingSession:
    return registry.get(session_id)
