"""Translation of facade levels and values into backend primitives.

Every function here matches exhaustively over the closed value union, so a
new variant fails type checking until it is handled in each mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from logbridge.foundation.log.level import Level
from logbridge.foundation.log.values import (
    DEFAULT_MAX_LAZY_DEPTH,
    Boolean,
    Byte,
    Double,
    Float,
    Integer,
    Long,
    Opaque,
    Short,
    String,
    render,
    resolve,
    to_underlying,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from opentelemetry.trace import Span
    from opentelemetry.util.types import AttributeValue

    from logbridge.foundation.log.values import LogEntry, Value


def structlog_method(level: Level) -> str:
    """Name of the structlog logging method for ``level``.

    structlog has no trace severity, so TRACE is emitted as debug.
    """
    match level:
        case Level.TRACE | Level.DEBUG:
            return "debug"
        case Level.INFO:
            return "info"
        case Level.WARN:
            return "warning"
        case Level.ERROR:
            return "error"
        case _:
            assert_never(level)


def span_attribute(value: Value, max_depth: int = DEFAULT_MAX_LAZY_DEPTH) -> AttributeValue:
    """Convert ``value`` into an OpenTelemetry attribute value.

    Booleans and numbers keep their native type. Byte, Short and Integer
    widen to the 64-bit int attribute; Float widens to double. Strings and
    opaque payloads are rendered with ``str()``.
    """
    resolved = resolve(value, max_depth)
    match resolved:
        case Boolean(value=raw):
            return raw
        case Byte(value=raw) | Short(value=raw) | Integer(value=raw) | Long(value=raw):
            return raw
        case Float(value=raw) | Double(value=raw):
            return raw
        case String() | Opaque():
            return render(resolved)
        case _:
            assert_never(resolved)


def set_span_attributes(
    span: Span,
    entries: Iterable[LogEntry],
    max_depth: int = DEFAULT_MAX_LAZY_DEPTH,
) -> None:
    """Attach each entry to ``span`` in order."""
    for entry in entries:
        span.set_attribute(entry.key, span_attribute(entry.value, max_depth))


def record_fields(
    entries: Iterable[LogEntry],
    max_depth: int = DEFAULT_MAX_LAZY_DEPTH,
) -> dict[str, Any]:
    """Map each key to its underlying value. The last duplicate of a key wins."""
    return {entry.key: to_underlying(entry.value, max_depth) for entry in entries}


def context_fields(
    entries: Iterable[LogEntry],
    max_depth: int = DEFAULT_MAX_LAZY_DEPTH,
) -> dict[str, str]:
    """Map each key to the rendered text of its value. The last duplicate wins."""
    return {entry.key: render(entry.value, max_depth) for entry in entries}
