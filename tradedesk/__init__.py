"""
tradedesk - simulated commodity trading desk.

Portfolio ledger, trade log, watchlist and price alerts behind a single
trading session facade, with a small HTTP API for dashboard front-ends.
"""

__version__ = "1.0.0"
