"""
API configuration.

Loads settings from environment variables (prefix ``TRADEDESK_``) and an
optional .env file.
"""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tradedesk.core.constants import (
    DEFAULT_PRICE_CACHE_TTL_SECONDS,
    DEFAULT_SESSION_DIR,
    DEFAULT_STARTING_CASH,
    MAX_STARTING_CASH,
)


class StorageBackend(StrEnum):
    """Where session records are kept."""

    MEMORY = "memory"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        storage_backend: Session store implementation.
        session_dir: Directory for JSON session files.
        starting_cash: Cash granted to a new session.
        price_cache_ttl_seconds: Lifetime of cached quotes.
        cors_origins: Front-end origins allowed to call the API.
        host: Interface uvicorn binds to.
        port: Port uvicorn listens on.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRADEDESK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Commodity Trading Desk API"
    version: str = "1.0.0"
    log_level: str = "INFO"
    storage_backend: StorageBackend = StorageBackend.JSON
    session_dir: str = DEFAULT_SESSION_DIR
    starting_cash: float = Field(default=DEFAULT_STARTING_CASH, ge=0, le=MAX_STARTING_CASH)
    price_cache_ttl_seconds: float = Field(default=DEFAULT_PRICE_CACHE_TTL_SECONDS, gt=0)
    cors_origins: list[str] = ["http://localhost:3000"]
    host: str = "127.0.0.1"
    port: int = Field(default=8000, gt=0, lt=65536)
