"""
Unit tests for price sources.
"""

import pytest

from tradedesk.core.exceptions import InvalidArgumentError, PriceUnavailableError
from tradedesk.infrastructure.prices import CachedPriceSource, StaticPriceSource
from tradedesk.infrastructure.prices.static_price_source import MOCK_MARKET_PRICES


class FakeTimer:
    """Manually advanced clock for TTL tests."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingSource(StaticPriceSource):
    """Static source that counts upstream lookups."""

    def __init__(self, prices: dict[str, float]) -> None:
        super().__init__(prices)
        self.calls = 0

    async def get_price(self, commodity: str) -> float:
        self.calls += 1
        return await super().get_price(commodity)


class FailingSource(StaticPriceSource):
    """Static source whose quotes can fail with an unexpected error."""

    async def get_price(self, commodity: str) -> float:
        if commodity == "explode":
            raise RuntimeError("feed crashed")
        return await super().get_price(commodity)


class TestStaticPriceSource:
    """Test the bundled mock market data."""

    @pytest.mark.asyncio
    async def test_should_quote_mock_prices(self) -> None:
        source = StaticPriceSource()

        assert await source.get_price("gold") == 94760.0
        assert await source.get_price("CRUDE_OIL") == MOCK_MARKET_PRICES["crude_oil"]

    @pytest.mark.asyncio
    async def test_should_raise_for_unknown_commodity(self) -> None:
        source = StaticPriceSource()

        with pytest.raises(PriceUnavailableError, match="unobtainium"):
            await source.get_price("unobtainium")

    @pytest.mark.asyncio
    async def test_should_update_and_remove_prices(self) -> None:
        source = StaticPriceSource({"gold": 100.0})

        source.update_price("gold", 120.0)
        assert await source.get_price("gold") == 120.0

        source.remove_price("gold")
        assert source.known_commodities() == []

    def test_should_reject_non_positive_price(self) -> None:
        with pytest.raises(InvalidArgumentError):
            StaticPriceSource({"gold": 0.0})

    @pytest.mark.asyncio
    async def test_should_omit_failed_quotes(self) -> None:
        source = StaticPriceSource({"gold": 100.0, "silver": 10.0})

        prices = await source.get_prices(["gold", "missing", "silver", "gold"])

        assert prices == {"gold": 100.0, "silver": 10.0}

    @pytest.mark.asyncio
    async def test_should_propagate_unexpected_errors(self) -> None:
        source = FailingSource({"gold": 100.0})

        with pytest.raises(RuntimeError, match="feed crashed"):
            await source.get_prices(["gold", "explode"])


class TestCachedPriceSource:
    """Test memoization, expiry and stale fallback."""

    @pytest.mark.asyncio
    async def test_should_serve_cached_quotes(self) -> None:
        # Arrange
        upstream = CountingSource({"gold": 100.0})
        cached = CachedPriceSource(upstream, ttl_seconds=60, timer=FakeTimer())

        # Act
        first = await cached.get_price("gold")
        second = await cached.get_price("gold")

        # Assert
        assert first == second == 100.0
        assert upstream.calls == 1
        stats = cached.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate_percent"] == 50.0
        assert stats["cache_size"] == 1

    @pytest.mark.asyncio
    async def test_should_refetch_after_ttl(self) -> None:
        timer = FakeTimer()
        upstream = CountingSource({"gold": 100.0})
        cached = CachedPriceSource(upstream, ttl_seconds=300, timer=timer)
        await cached.get_price("gold")

        upstream.update_price("gold", 110.0)
        timer.advance(299)
        assert await cached.get_price("gold") == 100.0
        timer.advance(2)
        assert await cached.get_price("gold") == 110.0

        assert upstream.calls == 2

    @pytest.mark.asyncio
    async def test_should_serve_stale_quote_when_upstream_fails(self) -> None:
        timer = FakeTimer()
        upstream = CountingSource({"gold": 100.0})
        cached = CachedPriceSource(upstream, ttl_seconds=10, timer=timer)
        await cached.get_price("gold")

        upstream.remove_price("gold")
        timer.advance(11)

        assert await cached.get_price("gold") == 100.0
        assert cached.get_stats()["stale_hits"] == 1

    @pytest.mark.asyncio
    async def test_should_raise_without_stale_quote(self) -> None:
        cached = CachedPriceSource(StaticPriceSource({}), timer=FakeTimer())

        with pytest.raises(PriceUnavailableError):
            await cached.get_price("gold")

    @pytest.mark.asyncio
    async def test_should_raise_when_stale_serving_disabled(self) -> None:
        timer = FakeTimer()
        upstream = StaticPriceSource({"gold": 100.0})
        cached = CachedPriceSource(upstream, ttl_seconds=10, serve_stale=False, timer=timer)
        await cached.get_price("gold")

        upstream.remove_price("gold")
        timer.advance(11)

        with pytest.raises(PriceUnavailableError):
            await cached.get_price("gold")

    @pytest.mark.asyncio
    async def test_should_invalidate_entries(self) -> None:
        upstream = CountingSource({"gold": 100.0, "silver": 10.0})
        cached = CachedPriceSource(upstream, timer=FakeTimer())
        await cached.get_prices(["gold", "silver"])

        cached.invalidate("gold")
        await cached.get_price("gold")
        await cached.get_price("silver")
        cached.invalidate()

        assert upstream.calls == 3
        assert cached.get_stats()["cache_size"] == 0

    @pytest.mark.parametrize(("ttl", "size"), [(0, 10), (10, 0)])
    def test_should_reject_invalid_cache_settings(self, ttl: float, size: int) -> None:
        with pytest.raises(ValueError):
            CachedPriceSource(StaticPriceSource(), ttl_seconds=ttl, maxsize=size)
