"""Shared fixtures for logbridge tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from structlog.testing import LogCapture

from logbridge.infra.otel.settings import get_otel_logger_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture()
def span_exporter() -> InMemorySpanExporter:
    """In-memory exporter collecting finished spans."""
    return InMemorySpanExporter()


@pytest.fixture()
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    """SDK tracer provider that exports synchronously to ``span_exporter``."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture()
def log_capture() -> Iterator[LogCapture]:
    """Route structlog records into a LogCapture, merging scoped context."""
    capture = LogCapture()
    structlog.reset_defaults()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    yield capture
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _isolate_state() -> Iterator[None]:
    """Clear cached settings and scoped context around every test."""
    get_otel_logger_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
    get_otel_logger_settings.cache_clear()
