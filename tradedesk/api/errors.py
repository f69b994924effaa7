"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses. No stack traces or internal details
are exposed to clients.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from tradedesk.core.exceptions import (
    PriceUnavailableError,
    StorageError,
    ValidationError,
)

HTTP_400 = 400
HTTP_500 = 500
HTTP_503 = 503


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(_request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning(f"Invalid request: {exc}")
        return _error_response(HTTP_400, "invalid_argument", str(exc))

    @app.exception_handler(PriceUnavailableError)
    async def handle_price_unavailable(
        _request: Request, exc: PriceUnavailableError
    ) -> JSONResponse:
        logger.warning(f"Price unavailable: {exc.commodity}")
        return _error_response(HTTP_503, "price_unavailable", f"No quote for {exc.commodity}")

    @app.exception_handler(StorageError)
    async def handle_storage_error(_request: Request, exc: StorageError) -> JSONResponse:
        logger.error(f"Storage failure for session {exc.session_id}: {exc.reason}")
        return _error_response(HTTP_500, "storage_error", "Session could not be persisted")
