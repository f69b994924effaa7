"""
Pydantic schemas for API request/response models.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from tradedesk.core.enums import AlertCondition, TradeOutcome, TradeSide


class TradeRequest(BaseModel):
    """Request model for a trade submission."""

    commodity: str = Field(..., min_length=1, max_length=64, description="Commodity identifier")
    side: TradeSide = Field(..., description="buy or sell")
    quantity: float = Field(..., gt=0, description="Units to trade")
    price: float | None = Field(
        default=None, gt=0, description="Price per unit; quoted from the price source if omitted"
    )

    @field_validator("commodity")
    @classmethod
    def strip_commodity(cls, v: str) -> str:
        """Reject whitespace-only identifiers."""
        v = v.strip()
        if not v:
            raise ValueError("commodity must not be blank")
        return v


class TradeModel(BaseModel):
    """An executed trade."""

    id: int
    commodity: str
    side: TradeSide
    price: float
    quantity: float
    total: float
    timestamp: datetime


class TradeResponse(BaseModel):
    """Response model for a trade submission."""

    success: bool
    outcome: TradeOutcome
    trade: TradeModel | None = None
    message: str = ""


class PositionModel(BaseModel):
    """A valued position."""

    commodity: str
    quantity: float
    average_price: float
    current_price: float
    market_value: float
    unrealized_pnl: float
    unrealized_pnl_percent: float
    priced: bool


class PortfolioResponse(BaseModel):
    """Response model for a portfolio snapshot."""

    session_id: str
    cash: float
    initial_cash: float
    invested: float
    holdings_value: float
    total_value: float
    unrealized_pnl: float
    total_return_percent: float
    positions: list[PositionModel]


class TradesResponse(BaseModel):
    """Response model for trade history, most recent first."""

    session_id: str
    count: int
    trades: list[TradeModel]


class WatchlistResponse(BaseModel):
    """Response model for the watchlist."""

    session_id: str
    commodities: list[str]


class WatchlistRequest(BaseModel):
    """Request model for adding a commodity to the watchlist."""

    commodity: str = Field(..., min_length=1, max_length=64)


class AlertRequest(BaseModel):
    """Request model for setting a price alert."""

    commodity: str = Field(..., min_length=1, max_length=64)
    target_price: float = Field(..., gt=0)
    condition: AlertCondition = AlertCondition.ABOVE


class AlertModel(BaseModel):
    """A price alert."""

    commodity: str
    target_price: float
    condition: AlertCondition
    created_at: datetime


class AlertsResponse(BaseModel):
    """Response model for a list of alerts."""

    session_id: str
    alerts: list[AlertModel]


class AlertCheckRequest(BaseModel):
    """Optional explicit prices to check alerts against."""

    prices: dict[str, float] | None = None


class PricesResponse(BaseModel):
    """Response model for current quotes."""

    prices: dict[str, float]
    missing: list[str]


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str
    message: str
    details: dict | None = None
