"""Structured logging configuration using structlog.

structlog is the log sink the adapter emits events into. This module offers
an opinionated configuration for applications that do not configure
structlog themselves:
- Scoped context merging, so values pushed with ``with_context`` reach
  every record
- Trace correlation (``trace_id`` / ``span_id``) from the current
  OpenTelemetry span
- JSON output for production, colored console output otherwise

Usage:
    # During application startup
    from logbridge.infra.otel.logging import configure_logging
    configure_logging()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from opentelemetry import trace
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import MutableMapping

# Type alias for structlog processor
Processor = structlog.types.Processor

_LEVEL_NAMES: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LoggingSettings(BaseSettings):
    """Threshold and output format for records written by ``configure_logging``.

    ``LOG_LEVEL`` is matched case-insensitively and also accepts the facade
    spelling ``WARN``. ``ENVIRONMENT=production`` switches rendering to JSON.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    environment: str = Field(default="development", alias="ENVIRONMENT")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: Any) -> str:
        name = str(v).strip().upper()
        if name == "WARN":
            name = "WARNING"
        if name not in _LEVEL_NAMES:
            msg = f"log_level must be one of {sorted(_LEVEL_NAMES)}, got {v!r}"
            raise ValueError(msg)
        return name

    @property
    def use_json_logs(self) -> bool:
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """The stdlib ``logging`` constant for ``log_level``."""
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]


def add_trace_context(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor adding trace_id and span_id of the current span.

    Records emitted outside a recording span are left untouched. IDs are
    formatted as 32 and 16 lowercase hex characters.
    """
    span = trace.get_current_span()
    if span.is_recording():
        span_context = span.get_span_context()
        event_dict.setdefault("trace_id", format(span_context.trace_id, "032x"))
        event_dict.setdefault("span_id", format(span_context.span_id, "016x"))
    return event_dict


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for structured logging.

    Configures structlog with:
    - Context variable merging (scoped context from ``with_context``)
    - Trace correlation from the active OpenTelemetry span
    - Log level filtering
    - ISO 8601 timestamps (UTC)
    - Environment-aware rendering (JSON for production, console for development)

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_trace_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    if settings.use_json_logs:
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_structlog_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name. If None, returns unbound logger.

    Returns:
        Bound structlog logger with ``logger=name`` context.
    """
    logger = structlog.get_logger()
    if name is not None:
        logger = logger.bind(logger=name)
    return logger
