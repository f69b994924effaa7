"""
Domain exceptions for the trading desk.
"""

from .trading import (
    ConfigurationError,
    InsufficientCashError,
    InsufficientQuantityError,
    InvalidArgumentError,
    LedgerError,
    NoPositionError,
    PriceUnavailableError,
    StorageError,
    TradingException,
    ValidationError,
)

__all__ = [
    "TradingException",
    "ValidationError",
    "ConfigurationError",
    "StorageError",
    "PriceUnavailableError",
    "LedgerError",
    "InvalidArgumentError",
    "InsufficientCashError",
    "NoPositionError",
    "InsufficientQuantityError",
]
