"""
Market data endpoints.
"""

from fastapi import APIRouter, Depends, Query

from tradedesk.api.dependencies import get_price_source
from tradedesk.api.schemas.api_models import PricesResponse
from tradedesk.core.enums import Commodity, CommodityCategory
from tradedesk.core.interfaces.price_source import IPriceSource

router = APIRouter()


@router.get("/commodities")
async def get_available_commodities() -> dict[str, list[str]]:
    """Known commodities grouped by category."""
    return {
        category.value: [commodity.value for commodity in Commodity.by_category(category)]
        for category in CommodityCategory
    }


@router.get("/prices", response_model=PricesResponse)
async def get_prices(
    commodities: list[str] | None = Query(default=None),
    price_source: IPriceSource = Depends(get_price_source),
) -> PricesResponse:
    """Current quotes; defaults to every known commodity."""
    requested = commodities or [commodity.value for commodity in Commodity]
    prices = await price_source.get_prices(requested)
    return PricesResponse(
        prices=prices,
        missing=[commodity for commodity in dict.fromkeys(requested) if commodity not in prices],
    )
