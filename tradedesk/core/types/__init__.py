"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    FINANCIAL_DECIMALS,
    HUNDRED,
    PERCENTAGE_DECIMALS,
    PRICE_DECIMALS,
    ZERO,
    calculate_pnl,
    calculate_pnl_percent,
    calculate_total,
    calculate_weighted_average,
    is_effectively_zero,
    round_amount,
    round_percentage,
    round_price,
    safe_float_comparison,
)

__all__ = [
    # Utility functions
    "round_price",
    "round_amount",
    "round_percentage",
    "calculate_total",
    "calculate_weighted_average",
    "calculate_pnl",
    "calculate_pnl_percent",
    "safe_float_comparison",
    "is_effectively_zero",
    # Constants
    "FINANCIAL_DECIMALS",
    "PERCENTAGE_DECIMALS",
    "PRICE_DECIMALS",
    "ZERO",
    "HUNDRED",
]
