"""Logger adapter over OpenTelemetry tracing and structlog logging.

``OtelLogger`` implements the facade :class:`~logbridge.foundation.log.ports.Logger`:

- ``event`` emits one structlog record whose fields are the entry values
- ``span`` runs a computation inside an OpenTelemetry span
- ``with_context`` binds entries into the scoped structlog context

Usage:
    from logbridge.foundation.log import Level, LogEntry
    from logbridge.infra.otel import OtelLogger

    log = OtelLogger("billing")
    log.event(Level.INFO, "invoice.sent", [LogEntry.of("invoice_id", 42)])
    total = log.span(Level.INFO, "invoice.total", [], compute_total)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from logbridge.infra.otel.attributes import (
    context_fields,
    record_fields,
    set_span_attributes,
    structlog_method,
)
from logbridge.infra.otel.context import StructlogContextStore
from logbridge.infra.otel.logging import get_structlog_logger
from logbridge.infra.otel.settings import get_otel_logger_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from opentelemetry.trace import TracerProvider

    from logbridge.foundation.log.level import Level
    from logbridge.foundation.log.values import LogEntry
    from logbridge.infra.otel.context import ContextStore
    from logbridge.infra.otel.settings import OtelLoggerSettings

T = TypeVar("T")


class OtelLogger:
    """Facade logger bound to a namespace.

    The namespace names both the structlog logger (bound as ``logger=``) and
    the OpenTelemetry tracer. Both are looked up on every call, so a tracer
    provider or structlog configuration installed after construction is
    picked up. Caching of those lookups is left to the backends.

    Records emitted by ``event`` carry ``logger`` (the namespace) and
    ``severity`` (the facade level name, so TRACE stays distinct from DEBUG)
    next to the entry fields. An entry using either key replaces it.

    Args:
        namespace: Logger and tracer name. Passed through unvalidated.
        tracer_provider: Provider to obtain tracers from. Defaults to the
            process-global provider.
        context_store: Scoped context store. Defaults to structlog
            context variables.
        settings: Adapter settings. Defaults to the environment.
    """

    def __init__(
        self,
        namespace: str,
        *,
        tracer_provider: TracerProvider | None = None,
        context_store: ContextStore | None = None,
        settings: OtelLoggerSettings | None = None,
    ) -> None:
        self.namespace = namespace
        self._tracer_provider = tracer_provider
        self._context_store = context_store or StructlogContextStore()
        self._settings = settings or get_otel_logger_settings()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(namespace={self.namespace!r})"

    def event(self, level: Level, name: str, entries: Sequence[LogEntry]) -> None:
        fields = record_fields(entries, self._settings.lazy_max_depth)
        bound = get_structlog_logger(self.namespace).bind(severity=level.name)
        # Entry keys are arbitrary strings, so they are merged into the bound
        # context directly rather than passed as keyword arguments.
        structlog.get_context(bound).update(fields)
        getattr(bound, structlog_method(level))(name)

    def span(
        self,
        level: Level,
        name: str,
        entries: Sequence[LogEntry],
        computation: Callable[[], T],
    ) -> T:
        # level has no OpenTelemetry counterpart; spans carry no severity.
        tracer = trace.get_tracer(self.namespace, tracer_provider=self._tracer_provider)
        span = tracer.start_span(name)

        # span.end() runs before use_span detaches the span from the context.
        with trace.use_span(
            span,
            end_on_exit=False,
            record_exception=False,
            set_status_on_exception=False,
        ):
            try:
                set_span_attributes(span, entries, self._settings.lazy_max_depth)
                result = computation()
                span.set_status(Status(StatusCode.OK))
                return result
            except BaseException as exc:
                span.set_status(Status(StatusCode.ERROR, f"{type(exc).__name__}: {exc}"))
                span.record_exception(exc)
                raise
            finally:
                span.end()

    def with_context(self, entries: Sequence[LogEntry], computation: Callable[[], T]) -> T:
        if not entries:
            return computation()

        values = context_fields(entries, self._settings.lazy_max_depth)
        with self._context_store.scope(values):
            return computation()
