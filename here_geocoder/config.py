"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- HERE_API_KEY=...
- HERE_GEOCODE_ENDPOINT=https://...
- HERE_HTTP_TIMEOUT_SECONDS=5
- HERE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

GEOCODE_ENDPOINT_URL = "https://geocode.search.hereapi.com/v1/geocode"
REVERSE_ENDPOINT_URL = "https://revgeocode.search.hereapi.com/v1/revgeocode"


class HereConfig(BaseSettings):
    """HERE API configuration.

    Environment variables prefixed with HERE_.
    """

    model_config = SettingsConfigDict(env_prefix="HERE_")

    api_key: Optional[SecretStr] = None
    geocode_endpoint: str = GEOCODE_ENDPOINT_URL
    reverse_endpoint: str = REVERSE_ENDPOINT_URL


class HttpConfig(BaseSettings):
    """HTTP transport configuration.

    Environment variables prefixed with HERE_HTTP_.
    """

    model_config = SettingsConfigDict(env_prefix="HERE_HTTP_")

    user_agent: str = "here-geocoder"
    timeout_seconds: float = 10.0
    max_retries: int = 2


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with HERE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="HERE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.here.geocode_endpoint)
        print(config.http.timeout_seconds)
    """

    model_config = SettingsConfigDict(env_prefix="HERE_APP_")

    here: HereConfig = Field(default_factory=HereConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
