# ABOUTME: Configuration module for application settings.
# ABOUTME: Uses pydantic-settings for environment variable overrides and provides cached access.

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackend(str, Enum):
    """Where profiles are persisted."""

    REMOTE = "remote"
    LOCAL = "local"


class LogFormat(str, Enum):
    """Log output format."""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with the
    KONTACTSHARE_ prefix (e.g., KONTACTSHARE_API_BASE_URL).
    """

    model_config = SettingsConfigDict(
        env_prefix="KONTACTSHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: Annotated[str, Field(description="Base URL of the profile service API")] = (
        "http://localhost:3001/api"
    )

    public_base_url: Annotated[
        str, Field(description="Base URL used to build shareable profile links")
    ] = "http://localhost:5173"

    request_timeout: Annotated[
        float, Field(description="HTTP request timeout in seconds", gt=0)
    ] = 10.0

    page_size: Annotated[int, Field(description="Profiles per page", ge=1, le=100)] = 20

    backend: Annotated[StoreBackend, Field(description="Profile store backend")] = (
        StoreBackend.REMOTE
    )

    local_db_path: Annotated[Path, Field(description="Path to the local SQLite profile store")] = (
        Path.home() / ".kontactshare-admin" / "profiles.db"
    )

    token_key: Annotated[str, Field(description="Keyring key holding the session token")] = (
        "admin_jwt"
    )

    log_level: Annotated[str, Field(description="Minimum log level")] = "WARNING"

    log_format: Annotated[LogFormat, Field(description="Log output format")] = LogFormat.CONSOLE


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings.

    Returns a cached Settings instance. Use get_settings.cache_clear()
    to clear the cache if needed.

    Returns:
        Cached Settings instance.
    """
    return Settings()

