"""
Core constants and limits.

Defines session defaults and resource limits for the simulated trading desk.
"""

# Session Defaults
DEFAULT_STARTING_CASH = 100000.0  # Paper cash for a fresh session
DEFAULT_WATCHLIST = ("gold", "silver", "crude_oil")

# Trading Limits
QUANTITY_EPSILON = 1e-9  # Remaining quantity below this closes the position

# Portfolio Limits
MAX_WATCHLIST_SIZE = 200
MAX_COMMODITY_ID_LENGTH = 64

# Starting capital bounds
MIN_STARTING_CASH = 0.0
MAX_STARTING_CASH = 100000000.0  # 100M

# Price Source
DEFAULT_PRICE_CACHE_TTL_SECONDS = 300.0  # Quotes are revalidated every five minutes
DEFAULT_PRICE_CACHE_SIZE = 256

# Persistence
SESSION_RECORD_VERSION = 1
DEFAULT_SESSION_DIR = "data/sessions"
