"""
Price source interface.

Price sources quote a current price for a named commodity. Quotes may fail
or be stale; callers resolve prices before handing them to the ledger.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable

from loguru import logger

from tradedesk.core.exceptions import PriceUnavailableError


class IPriceSource(ABC):
    """Abstract interface for commodity quotes."""

    @abstractmethod
    async def get_price(self, commodity: str) -> float:
        """Current price for a commodity.

        Raises:
            PriceUnavailableError: If no quote can be produced
        """

    async def get_prices(self, commodities: Iterable[str]) -> dict[str, float]:
        """Current prices for several commodities; failed quotes are omitted."""
        names = list(dict.fromkeys(commodities))
        results = await asyncio.gather(
            *(self.get_price(name) for name in names), return_exceptions=True
        )

        prices: dict[str, float] = {}
        for name, result in zip(names, results, strict=True):
            if isinstance(result, PriceUnavailableError):
                logger.warning(f"Skipping quote: {result}")
            elif isinstance(result, BaseException):
                raise result
            else:
                prices[name] = result
        return prices
