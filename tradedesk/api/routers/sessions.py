"""
Trading session endpoints: portfolio, trades, watchlist and alerts.

Sessions are locked and save through the session store, so session access
runs in the threadpool: plain ``def`` handlers, or ``run_in_threadpool``
where a handler also awaits the price source.
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from tradedesk.api.dependencies import get_price_source, get_session
from tradedesk.api.schemas.api_models import (
    AlertCheckRequest,
    AlertModel,
    AlertRequest,
    AlertsResponse,
    ErrorResponse,
    PortfolioResponse,
    TradeModel,
    TradeRequest,
    TradeResponse,
    TradesResponse,
    WatchlistRequest,
    WatchlistResponse,
)
from tradedesk.core.interfaces.price_source import IPriceSource
from tradedesk.core.models import PriceAlert, Trade, TradingSession

router = APIRouter()


def _trade_model(trade: Trade) -> TradeModel:
    return TradeModel(**trade.to_dict())


def _alert_model(alert: PriceAlert) -> AlertModel:
    return AlertModel(**alert.to_dict())


@router.get("/{session_id}/portfolio", response_model=PortfolioResponse)
async def get_portfolio(
    session: TradingSession = Depends(get_session),
    price_source: IPriceSource = Depends(get_price_source),
) -> PortfolioResponse:
    """Portfolio snapshot valued at current prices."""
    positions = await run_in_threadpool(lambda: session.positions)
    prices = await price_source.get_prices(p.commodity for p in positions)
    summary = await run_in_threadpool(session.portfolio_summary, prices)
    return PortfolioResponse(session_id=session.session_id, **summary)


@router.get("/{session_id}/trades", response_model=TradesResponse)
def get_trades(session: TradingSession = Depends(get_session)) -> TradesResponse:
    """Trade history, most recent first."""
    trades = session.trades
    return TradesResponse(
        session_id=session.session_id,
        count=len(trades),
        trades=[_trade_model(trade) for trade in trades],
    )


@router.post(
    "/{session_id}/trades",
    response_model=TradeResponse,
    responses={400: {"model": ErrorResponse}},
)
async def submit_trade(
    request: TradeRequest,
    session: TradingSession = Depends(get_session),
    price_source: IPriceSource = Depends(get_price_source),
) -> TradeResponse | JSONResponse:
    """Execute a trade; price is quoted from the price source when omitted."""
    price = request.price
    if price is None:
        price = await price_source.get_price(request.commodity)

    result = await run_in_threadpool(
        session.submit_trade, request.commodity, request.side, request.quantity, price
    )
    response = TradeResponse(
        success=result.success,
        outcome=result.outcome,
        trade=_trade_model(result.trade) if result.trade is not None else None,
        message=result.message,
    )
    if not result.success:
        error = ErrorResponse(
            error=result.outcome.value,
            message=result.message,
            details=response.model_dump(mode="json"),
        )
        return JSONResponse(status_code=400, content=error.model_dump())
    return response


@router.get("/{session_id}/watchlist", response_model=WatchlistResponse)
def get_watchlist(session: TradingSession = Depends(get_session)) -> WatchlistResponse:
    return WatchlistResponse(
        session_id=session.session_id, commodities=session.watched_commodities()
    )


@router.post("/{session_id}/watchlist", response_model=WatchlistResponse)
def add_to_watchlist(
    request: WatchlistRequest, session: TradingSession = Depends(get_session)
) -> WatchlistResponse:
    session.add_to_watchlist(request.commodity)
    return WatchlistResponse(
        session_id=session.session_id, commodities=session.watched_commodities()
    )


@router.delete("/{session_id}/watchlist/{commodity}", response_model=WatchlistResponse)
def remove_from_watchlist(
    commodity: str, session: TradingSession = Depends(get_session)
) -> WatchlistResponse:
    session.remove_from_watchlist(commodity)
    return WatchlistResponse(
        session_id=session.session_id, commodities=session.watched_commodities()
    )


@router.get("/{session_id}/alerts", response_model=AlertsResponse)
def get_alerts(session: TradingSession = Depends(get_session)) -> AlertsResponse:
    return AlertsResponse(
        session_id=session.session_id,
        alerts=[_alert_model(alert) for alert in session.price_alerts()],
    )


@router.post("/{session_id}/alerts", response_model=AlertModel)
def set_alert(
    request: AlertRequest, session: TradingSession = Depends(get_session)
) -> AlertModel:
    alert = session.set_price_alert(request.commodity, request.target_price, request.condition)
    return _alert_model(alert)


@router.delete("/{session_id}/alerts/{commodity}", response_model=AlertsResponse)
def remove_alert(
    commodity: str, session: TradingSession = Depends(get_session)
) -> AlertsResponse:
    session.remove_price_alert(commodity)
    return AlertsResponse(
        session_id=session.session_id,
        alerts=[_alert_model(alert) for alert in session.price_alerts()],
    )


@router.post("/{session_id}/alerts/check", response_model=AlertsResponse)
async def check_alerts(
    request: AlertCheckRequest | None = None,
    session: TradingSession = Depends(get_session),
    price_source: IPriceSource = Depends(get_price_source),
) -> AlertsResponse:
    """Check alerts against given prices, or current quotes; returns the triggered ones."""
    prices = request.prices if request is not None and request.prices is not None else None
    if prices is None:
        alerts = await run_in_threadpool(session.price_alerts)
        prices = await price_source.get_prices(a.commodity for a in alerts)
    triggered = await run_in_threadpool(session.check_price_alerts, prices)
    return AlertsResponse(
        session_id=session.session_id,
        alerts=[_alert_model(alert) for alert in triggered],
    )
