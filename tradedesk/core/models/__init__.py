"""
Domain models for the trading desk.
"""

from .config import SessionConfig
from .portfolio_ledger import PortfolioLedger
from .portfolio_metrics import PortfolioMetrics
from .position import Position
from .price_alert import AlertBook, PriceAlert
from .session import TradingSession
from .trade import Trade
from .trade_log import TradeLog
from .trade_result import TradeResult
from .watchlist import Watchlist

__all__ = [
    "AlertBook",
    "PortfolioLedger",
    "PortfolioMetrics",
    "Position",
    "PriceAlert",
    "SessionConfig",
    "Trade",
    "TradeLog",
    "TradeResult",
    "TradingSession",
    "Watchlist",
]
