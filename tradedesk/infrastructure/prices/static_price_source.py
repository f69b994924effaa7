"""
Static price source backed by bundled mock market data.
"""

from collections.abc import Mapping

from loguru import logger

from tradedesk.core.enums import Commodity
from tradedesk.core.exceptions import PriceUnavailableError
from tradedesk.core.interfaces.price_source import IPriceSource
from tradedesk.core.utils.validation import validate_commodity, validate_positive

# Reference quotes shown on the market watch page
MOCK_MARKET_PRICES: dict[str, float] = {
    Commodity.GOLD: 94760.0,
    Commodity.SILVER: 952.0,
    Commodity.COPPER: 906.4,
    Commodity.ALUMINIUM: 232.85,
    Commodity.LEAD: 191.85,
    Commodity.ZINC: 273.95,
    Commodity.NICKEL: 1654.3,
    Commodity.CRUDE_OIL: 5811.0,
    Commodity.NATURAL_GAS: 356.1,
    Commodity.BRENT_CRUDE: 6122.0,
    Commodity.HEATING_OIL: 2345.0,
    Commodity.COTTON: 1795.0,
    Commodity.SOYBEAN: 6060.0,
    Commodity.WHEAT: 2390.0,
    Commodity.CORN: 1970.0,
    Commodity.SUGAR: 3410.0,
    Commodity.RUBBER: 18760.0,
    Commodity.MENTHA_OIL: 958.9,
    Commodity.CPO: 876.0,
}


class StaticPriceSource(IPriceSource):
    """Quotes from an in-memory price table.

    Lookups are case-insensitive. Prices can be moved with ``update_price``
    to simulate a market.
    """

    def __init__(self, prices: Mapping[str, float] | None = None) -> None:
        seed = MOCK_MARKET_PRICES if prices is None else prices
        self._prices: dict[str, float] = {}
        for commodity, price in seed.items():
            self.update_price(commodity, price)

    @staticmethod
    def _key(commodity: str) -> str:
        return validate_commodity(commodity).lower()

    def update_price(self, commodity: str, price: float) -> None:
        """Set the quote for a commodity."""
        self._prices[self._key(commodity)] = validate_positive(price, "price")

    def remove_price(self, commodity: str) -> None:
        """Drop the quote for a commodity so lookups fail."""
        self._prices.pop(self._key(commodity), None)

    def known_commodities(self) -> list[str]:
        return sorted(self._prices)

    async def get_price(self, commodity: str) -> float:
        price = self._prices.get(self._key(commodity))
        if price is None:
            logger.debug(f"No static quote for {commodity}")
            raise PriceUnavailableError(commodity)
        return price
