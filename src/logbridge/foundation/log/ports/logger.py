"""Port interfaces for leveled events, spans and scoped context.

Application code depends on these protocols only. Backend adapters (for
example :mod:`logbridge.infra.otel`) implement them.

Example:
    >>> from logbridge.foundation.log import Level, LogEntry
    >>> from logbridge.foundation.log.ports import Logger
    >>> def charge(log: Logger, amount: int) -> str:
    ...     return log.span(
    ...         Level.INFO,
    ...         "payment.charge",
    ...         [LogEntry.of("amount", amount)],
    ...         lambda: "ok",
    ...     )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from logbridge.foundation.log.level import Level
    from logbridge.foundation.log.values import LogEntry

T = TypeVar("T")


@runtime_checkable
class Logger(Protocol):
    """Port for structured logging and tracing.

    The protocol is runtime_checkable to enable isinstance() verification
    in tests and dependency injection validation.
    """

    def event(self, level: Level, name: str, entries: Sequence[LogEntry]) -> None:
        """Emit a named, leveled, point-in-time event.

        Args:
            level: Event severity.
            name: Logical event identifier (e.g. ``"user.login"``).
            entries: Key/value pairs. Later duplicates of a key win.
        """
        ...

    def span(
        self,
        level: Level,
        name: str,
        entries: Sequence[LogEntry],
        computation: Callable[[], T],
    ) -> T:
        """Run ``computation`` inside a named span and return its result.

        Any exception raised by ``computation`` is recorded on the span and
        re-raised unchanged.

        Args:
            level: Span severity. Implementations may ignore it.
            name: Span name.
            entries: Initial span attributes.
            computation: Zero-argument unit of work.

        Returns:
            Whatever ``computation`` returns.
        """
        ...

    def with_context(self, entries: Sequence[LogEntry], computation: Callable[[], T]) -> T:
        """Run ``computation`` with ``entries`` attached to every event it emits.

        The context is restored to its previous state when ``computation``
        returns or raises.
        """
        ...


@runtime_checkable
class LoggerFactory(Protocol):
    """Port for constructing loggers bound to a namespace."""

    def create_logger(self, namespace: str) -> Logger:
        """Return a new logger bound to ``namespace``."""
        ...
