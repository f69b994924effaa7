"""
Price cache statistics tracking.
"""

from threading import RLock


class PriceCacheStatistics:
    """Handles price cache statistics tracking with thread safety."""

    def __init__(self) -> None:
        self._stats_lock = RLock()
        self._cache_hits = 0
        self._cache_misses = 0
        self._stale_hits = 0

    def record_hit(self) -> None:
        with self._stats_lock:
            self._cache_hits += 1

    def record_miss(self) -> None:
        with self._stats_lock:
            self._cache_misses += 1

    def record_stale(self) -> None:
        """Record a stale quote served because the upstream source failed."""
        with self._stats_lock:
            self._stale_hits += 1

    def get_hit_rate(self) -> float:
        """Calculate cache hit rate as percentage."""
        with self._stats_lock:
            total_requests = self._cache_hits + self._cache_misses
            if total_requests == 0:
                return 0.0
            return (self._cache_hits / total_requests) * 100

    def get_stats(self) -> dict[str, int | float]:
        with self._stats_lock:
            return {
                "hits": self._cache_hits,
                "misses": self._cache_misses,
                "stale_hits": self._stale_hits,
                "hit_rate_percent": round(self.get_hit_rate(), 1),
            }
