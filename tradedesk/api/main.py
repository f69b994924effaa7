"""
FastAPI main application for the commodity trading desk.
"""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from tradedesk.core.interfaces.price_source import IPriceSource
from tradedesk.core.models import SessionConfig
from tradedesk.core.utils.log_setup import configure_logging
from tradedesk.infrastructure.prices import CachedPriceSource, StaticPriceSource

from .dependencies import SessionRegistry, build_store
from .errors import register_error_handlers
from .routers import market, sessions
from .settings import Settings


def create_app(
    settings: Settings | None = None, price_source: IPriceSource | None = None
) -> FastAPI:
    """Build the application.

    Args:
        settings: Configuration; read from the environment when omitted
        price_source: Upstream quotes; defaults to the bundled mock market data
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description="Simulated commodity trading: portfolio, trades, watchlist and alerts",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    )

    app.state.settings = settings
    app.state.registry = SessionRegistry(
        build_store(settings), SessionConfig(starting_cash=settings.starting_cash)
    )
    app.state.price_source = CachedPriceSource(
        price_source or StaticPriceSource(), ttl_seconds=settings.price_cache_ttl_seconds
    )

    register_error_handlers(app)
    app.include_router(sessions.router, prefix="/api/sessions", tags=["sessions"])
    app.include_router(market.router, prefix="/api/market", tags=["market"])

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {"message": settings.project_name, "version": settings.version, "status": "running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info(
        f"{settings.project_name} ready (storage={settings.storage_backend.value}, "
        f"starting_cash={settings.starting_cash})"
    )
    return app


app = create_app()


def run(settings: Settings | None = None) -> None:
    """Serve the application with uvicorn."""
    settings = settings or Settings()
    uvicorn.run("tradedesk.api.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
