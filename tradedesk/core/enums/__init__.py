"""
Core enumerations for the trading desk.

This module provides centralized enumerations for domain concepts
like commodities, trade sides and alert conditions.
"""

from .alert_conditions import AlertCondition
from .commodities import Commodity, CommodityCategory
from .trade_sides import TradeOutcome, TradeSide

__all__ = ["AlertCondition", "Commodity", "CommodityCategory", "TradeOutcome", "TradeSide"]
