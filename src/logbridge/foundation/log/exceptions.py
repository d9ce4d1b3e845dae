"""Facade exception hierarchy.

Errors raised by the facade itself (malformed entries, runaway lazy chains,
missing factories). Failures raised by user computations wrapped in a span or
scoped context are never converted into these types.

Example:
    >>> from logbridge.foundation.log.exceptions import InvalidLogEntryError
    >>> raise InvalidLogEntryError("Log entry key must not be empty")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "InvalidLogEntryError",
    "LazyResolutionError",
    "LogFacadeError",
    "NoLoggerFactoryError",
]


class LogFacadeError(Exception):
    """Base class for all facade errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information.
    """

    error_code: str = "LOG_FACADE_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class InvalidLogEntryError(LogFacadeError, ValueError):
    """Raised when a log entry or value is constructed with invalid data.

    Covers empty keys and integer payloads outside the width of their
    variant (e.g. ``Byte(300)``).
    """

    error_code: str = "INVALID_LOG_ENTRY"


class LazyResolutionError(LogFacadeError):
    """Raised when a chain of lazy values does not bottom out.

    Example:
        >>> raise LazyResolutionError(max_depth=64)
        LazyResolutionError: Lazy value chain did not resolve to a concrete value (max_depth=64)
    """

    error_code: str = "LAZY_RESOLUTION_FAILED"

    def __init__(self, max_depth: int) -> None:
        super().__init__(
            "Lazy value chain did not resolve to a concrete value",
            context={"max_depth": max_depth},
        )
        self.max_depth = max_depth


class NoLoggerFactoryError(LogFacadeError):
    """Raised when no logger factory is registered under the discovery group."""

    error_code: str = "NO_LOGGER_FACTORY"

    def __init__(self, group: str, name: str | None = None) -> None:
        context: dict[str, Any] = {"group": group}
        if name is not None:
            context["name"] = name
        super().__init__("No logger factory could be loaded", context=context)
        self.group = group
        self.name = name
