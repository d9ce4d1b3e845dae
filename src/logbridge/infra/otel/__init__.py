"""Logbridge Infra OTel -- facade logger over OpenTelemetry and structlog."""

from logbridge.infra.otel.context import ContextStore, StructlogContextStore, current_context
from logbridge.infra.otel.factory import OtelLoggerFactory
from logbridge.infra.otel.logger import OtelLogger
from logbridge.infra.otel.logging import (
    LoggingSettings,
    add_trace_context,
    configure_logging,
    get_structlog_logger,
)
from logbridge.infra.otel.settings import OtelLoggerSettings

__all__ = [
    "ContextStore",
    "LoggingSettings",
    "OtelLogger",
    "OtelLoggerFactory",
    "OtelLoggerSettings",
    "StructlogContextStore",
    "add_trace_context",
    "configure_logging",
    "current_context",
    "get_structlog_logger",
]
