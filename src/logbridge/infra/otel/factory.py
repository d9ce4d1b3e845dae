"""Logger factory registered for entry-point discovery.

Registered in the ``logbridge.logger_factories`` group as ``otel`` so that
:func:`logbridge.foundation.log.discovery.get_logger` finds it without the
application importing this package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logbridge.infra.otel.logger import OtelLogger

if TYPE_CHECKING:
    from opentelemetry.trace import TracerProvider

    from logbridge.infra.otel.context import ContextStore
    from logbridge.infra.otel.settings import OtelLoggerSettings


class OtelLoggerFactory:
    """Creates a fresh :class:`OtelLogger` per call.

    Loggers are not cached or deduplicated by namespace. Any namespace,
    including an empty string, is passed through unchanged. Optional
    collaborators given here are handed to every logger created.
    """

    def __init__(
        self,
        *,
        tracer_provider: TracerProvider | None = None,
        context_store: ContextStore | None = None,
        settings: OtelLoggerSettings | None = None,
    ) -> None:
        self._tracer_provider = tracer_provider
        self._context_store = context_store
        self._settings = settings

    def create_logger(self, namespace: str) -> OtelLogger:
        return OtelLogger(
            namespace,
            tracer_provider=self._tracer_provider,
            context_store=self._context_store,
            settings=self._settings,
        )
