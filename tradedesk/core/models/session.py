"""
Trading session - the single entry point for trading.

A session bundles the portfolio ledger, trade log, watchlist and price
alerts of one user. It is constructed explicitly and owned by the caller;
persistence goes through an injected session store (load at start, save
after every mutation).
"""

from collections.abc import Mapping
from threading import RLock
from typing import Any

from loguru import logger

from tradedesk.core.constants import SESSION_RECORD_VERSION
from tradedesk.core.enums import AlertCondition, TradeSide
from tradedesk.core.exceptions import LedgerError, StorageError, ValidationError
from tradedesk.core.interfaces.storage import ISessionStore
from tradedesk.core.models.config import SessionConfig
from tradedesk.core.models.portfolio_ledger import PortfolioLedger
from tradedesk.core.models.portfolio_metrics import PortfolioMetrics
from tradedesk.core.models.position import Position
from tradedesk.core.models.price_alert import AlertBook, PriceAlert
from tradedesk.core.models.trade import Trade
from tradedesk.core.models.trade_log import TradeLog
from tradedesk.core.models.trade_result import TradeResult
from tradedesk.core.models.watchlist import Watchlist
from tradedesk.core.utils.decorators import log_trades
from tradedesk.core.utils.validation import validate_session_id

from .portfolio_helpers import OrderValidator, TradeRecorder


class TradingSession:
    """Facade over ledger, trade log, watchlist and alerts for one session.

    ``execute_trade`` is the only way to change cash and positions. The
    ledger validates before mutating, and the trade is recorded only after
    the ledger accepted it, so from the caller's point of view a trade either
    happens completely or not at all.

    Mutations and reads are serialized by a per-session lock, so a session may
    be shared between worker threads.
    """

    def __init__(
        self,
        session_id: str = "default",
        ledger: PortfolioLedger | None = None,
        trade_log: TradeLog | None = None,
        watchlist: Watchlist | None = None,
        alerts: AlertBook | None = None,
        store: ISessionStore | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.session_id = validate_session_id(session_id)
        if ledger is None:
            ledger = PortfolioLedger(initial_cash=self.config.starting_cash)
        self.ledger = ledger
        self.trade_log = trade_log if trade_log is not None else TradeLog()
        self.watchlist = (
            watchlist if watchlist is not None else Watchlist(self.config.default_watchlist)
        )
        self.alert_book = alerts if alerts is not None else AlertBook()
        self.store = store
        self._lock = RLock()

    # Construction and persistence
    @classmethod
    def load(
        cls,
        session_id: str,
        store: ISessionStore,
        config: SessionConfig | None = None,
    ) -> "TradingSession":
        """Load a session from the store, starting a fresh one if none is stored.

        Raises:
            StorageError: If the stored record is unreadable
        """
        record = store.load(session_id)
        if record is None:
            logger.info(f"Starting new trading session {session_id}")
            session = cls(session_id=session_id, store=store, config=config)
            session.save()
            return session
        try:
            session = cls.from_record(record, store=store, config=config)
        except ValidationError as e:
            raise StorageError(session_id, f"corrupt session record: {e}") from e
        logger.debug(f"Loaded trading session {session_id} with {len(session.trade_log)} trades")
        return session

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        store: ISessionStore | None = None,
        config: SessionConfig | None = None,
    ) -> "TradingSession":
        """Rebuild a session from ``to_record`` output."""
        version = record.get("version", SESSION_RECORD_VERSION)
        if version != SESSION_RECORD_VERSION:
            raise ValidationError(f"Unsupported session record version: {version}")
        try:
            return cls(
                session_id=str(record["session_id"]),
                ledger=PortfolioLedger.from_dict(record["portfolio"]),
                trade_log=TradeLog.from_records(
                    record.get("trades", []), next_trade_id=int(record.get("next_trade_id", 1))
                ),
                watchlist=Watchlist(record.get("watchlist", [])),
                alerts=AlertBook.from_records(record.get("alerts", [])),
                store=store,
                config=config,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid session record: {e}") from e

    def to_record(self) -> dict[str, Any]:
        """JSON-compatible snapshot of the whole session."""
        with self._lock:
            return {
                "version": SESSION_RECORD_VERSION,
                "session_id": self.session_id,
                "portfolio": self.ledger.to_dict(),
                "trades": self.trade_log.to_records(),
                "next_trade_id": self.trade_log.peek_next_id,
                "watchlist": self.watchlist.to_list(),
                "alerts": self.alert_book.to_records(),
            }

    def save(self) -> None:
        """Write the session to its store, if it has one."""
        if self.store is None:
            return
        with self._lock:
            self.store.save(self.session_id, self.to_record())

    def _persist(self) -> None:
        if self.config.autosave:
            self.save()

    # Trading
    def execute_trade(
        self, commodity: str, side: TradeSide | str, quantity: float, price: float
    ) -> bool:
        """Execute a trade and report only whether it was committed.

        Use ``submit_trade`` to learn why a trade was rejected.
        """
        return self.submit_trade(commodity, side, quantity, price).success

    @log_trades
    def submit_trade(
        self, commodity: str, side: TradeSide | str, quantity: float, price: float
    ) -> TradeResult:
        """Execute a trade and return a tagged result.

        On success the ledger and trade log are updated and the session is
        saved. On rejection nothing changes.

        Args:
            commodity: Commodity identifier
            side: "buy" or "sell"
            quantity: Units to trade, must be positive
            price: Price per unit, must be positive

        Returns:
            TradeResult carrying the committed trade or the rejection reason
        """
        with self._lock:
            try:
                commodity, side, quantity, price = OrderValidator.validate_order(
                    commodity, side, quantity, price
                )
                self.ledger.apply_trade(commodity, side, quantity, price)
            except LedgerError as e:
                logger.warning(f"Trade rejected ({e.outcome.value}): {e}")
                return TradeResult.rejected(e)

            trade = TradeRecorder.create_trade(
                trade_id=self.trade_log.next_id(),
                commodity=commodity,
                side=side,
                quantity=quantity,
                price=price,
            )
            self.trade_log.append(trade)
            logger.info(
                f"Executed trade #{trade.id}: {trade.side.value} {trade.quantity} "
                f"{trade.commodity} at {trade.price} (total={trade.total:.2f})"
            )
            self._persist()
            return TradeResult.committed(trade)

    # Read accessors
    @property
    def cash(self) -> float:
        """Available cash."""
        with self._lock:
            return self.ledger.cash

    @property
    def positions(self) -> list[Position]:
        """Snapshot of open positions."""
        with self._lock:
            return self.ledger.position_list()

    @property
    def trades(self) -> list[Trade]:
        """Trade history, most recent first."""
        with self._lock:
            return self.trade_log.all()

    def get_position(self, commodity: str) -> Position | None:
        """Snapshot of one position, or None if not held."""
        with self._lock:
            return self.ledger.get_position(commodity)

    def metrics(self) -> PortfolioMetrics:
        """Valuation helper bound to this session's ledger."""
        return PortfolioMetrics(self.ledger)

    def portfolio_summary(self, current_prices: Mapping[str, float]) -> dict[str, Any]:
        """Valuation of the portfolio at the given prices."""
        with self._lock:
            return self.metrics().summary(current_prices)

    # Watchlist
    def watched_commodities(self) -> list[str]:
        """Watchlist contents in insertion order."""
        with self._lock:
            return self.watchlist.to_list()

    def add_to_watchlist(self, commodity: str) -> bool:
        """Watch a commodity; returns True if the watchlist changed."""
        with self._lock:
            changed = self.watchlist.add(commodity)
            if changed:
                self._persist()
            return changed

    def remove_from_watchlist(self, commodity: str) -> bool:
        """Stop watching a commodity; returns True if the watchlist changed."""
        with self._lock:
            changed = self.watchlist.remove(commodity)
            if changed:
                self._persist()
            return changed

    def is_watched(self, commodity: str) -> bool:
        """Check watchlist membership."""
        with self._lock:
            return self.watchlist.contains(commodity)

    # Price alerts
    def set_price_alert(
        self,
        commodity: str,
        target_price: float,
        condition: AlertCondition | str = AlertCondition.ABOVE,
    ) -> PriceAlert:
        """Set the alert for a commodity, replacing any existing one."""
        with self._lock:
            alert = self.alert_book.set_alert(commodity, target_price, condition)
            self._persist()
            return alert

    def remove_price_alert(self, commodity: str) -> bool:
        """Remove the alert for a commodity; returns True if one existed."""
        with self._lock:
            removed = self.alert_book.remove_alert(commodity)
            if removed:
                self._persist()
            return removed

    def price_alerts(self) -> list[PriceAlert]:
        """Active alerts."""
        with self._lock:
            return self.alert_book.alerts()

    def check_price_alerts(self, current_prices: Mapping[str, float]) -> list[PriceAlert]:
        """Return alerts triggered by the given prices; triggered alerts are consumed."""
        with self._lock:
            triggered = self.alert_book.check(dict(current_prices))
            if triggered:
                self._persist()
            return triggered
