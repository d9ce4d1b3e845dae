"""Adapter settings loaded from the environment."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from logbridge.foundation.log.values import DEFAULT_MAX_LAZY_DEPTH


class OtelLoggerSettings(BaseSettings):
    """OpenTelemetry logger adapter configuration.

    Loads configuration from environment variables:
    - LOGBRIDGE_LAZY_MAX_DEPTH: Maximum nesting of lazy values resolved
      before giving up (default: 64)

    Attributes:
        lazy_max_depth: Upper bound on ``Lazy`` layers evaluated per value.

    Example:
        >>> OtelLoggerSettings().lazy_max_depth
        64
        >>> OtelLoggerSettings(lazy_max_depth=8).lazy_max_depth
        8
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    lazy_max_depth: int = Field(
        default=DEFAULT_MAX_LAZY_DEPTH,
        ge=1,
        alias="LOGBRIDGE_LAZY_MAX_DEPTH",
        description="Maximum number of lazy layers resolved per value",
    )


@lru_cache(maxsize=1)
def get_otel_logger_settings() -> OtelLoggerSettings:
    """Get cached OtelLoggerSettings instance.

    Clear cache with ``get_otel_logger_settings.cache_clear()`` for testing.
    """
    return OtelLoggerSettings()
