"""
Memoizing price source wrapper.

Fresh quotes are kept in a TTL cache. When the wrapped source fails, the
last quote ever seen for the commodity is served instead, if there is one.
"""

import time
from collections.abc import Callable
from threading import RLock

from cachetools import LRUCache, TTLCache
from loguru import logger

from tradedesk.core.constants import DEFAULT_PRICE_CACHE_SIZE, DEFAULT_PRICE_CACHE_TTL_SECONDS
from tradedesk.core.exceptions import PriceUnavailableError
from tradedesk.core.interfaces.price_source import IPriceSource

from .cache_statistics import PriceCacheStatistics


class CachedPriceSource(IPriceSource):
    """Caches quotes from another price source for ``ttl_seconds``."""

    def __init__(
        self,
        source: IPriceSource,
        ttl_seconds: float = DEFAULT_PRICE_CACHE_TTL_SECONDS,
        maxsize: int = DEFAULT_PRICE_CACHE_SIZE,
        serve_stale: bool = True,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("Cache TTL must be positive")
        if maxsize <= 0:
            raise ValueError("Cache size must be positive")

        self.source = source
        self.serve_stale = serve_stale
        self._cache: TTLCache[str, float] = TTLCache(maxsize=maxsize, ttl=ttl_seconds, timer=timer)
        self._last_known: LRUCache[str, float] = LRUCache(maxsize=maxsize)
        self._cache_lock = RLock()
        self._statistics = PriceCacheStatistics()

    async def get_price(self, commodity: str) -> float:
        with self._cache_lock:
            cached = self._cache.get(commodity)
            if cached is not None:
                self._statistics.record_hit()
                return cached
            self._statistics.record_miss()

        try:
            price = await self.source.get_price(commodity)
        except PriceUnavailableError:
            stale = self._last_known.get(commodity) if self.serve_stale else None
            if stale is None:
                raise
            self._statistics.record_stale()
            logger.warning(f"Serving stale quote for {commodity}: {stale}")
            return stale

        with self._cache_lock:
            self._cache[commodity] = price
            self._last_known[commodity] = price
        return price

    def invalidate(self, commodity: str | None = None) -> None:
        """Drop fresh quotes so the next lookup hits the wrapped source."""
        with self._cache_lock:
            if commodity is None:
                self._cache.clear()
            else:
                self._cache.pop(commodity, None)

    def get_stats(self) -> dict[str, int | float]:
        with self._cache_lock:
            return {
                **self._statistics.get_stats(),
                "cache_size": len(self._cache),
                "max_size": int(self._cache.maxsize),
            }
