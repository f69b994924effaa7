"""
Commodity price sources.
"""

from .cached_price_source import CachedPriceSource
from .static_price_source import StaticPriceSource

__all__ = ["CachedPriceSource", "StaticPriceSource"]
