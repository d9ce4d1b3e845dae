"""Scoped logging context backed by structlog context variables.

Values pushed into a scope are merged into every structlog record emitted
while the scope is active (via ``structlog.contextvars.merge_contextvars``).
Leaving a scope resets each bound variable with the token returned when it
was bound, so a key that shadowed an outer value gets the outer value back
and a key that was new disappears again.

Scopes live in ``contextvars`` and are therefore confined to the calling
thread or asyncio task.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from contextlib import AbstractContextManager


@runtime_checkable
class ContextStore(Protocol):
    """Port for a dynamically scoped key/value store."""

    def scope(self, values: Mapping[str, str]) -> AbstractContextManager[None]:
        """Bind ``values`` for the duration of a ``with`` block."""
        ...

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the currently bound values."""
        ...


class StructlogContextStore:
    """ContextStore over ``structlog.contextvars``."""

    @contextmanager
    def scope(self, values: Mapping[str, str]) -> Iterator[None]:
        tokens = structlog.contextvars.bind_contextvars(**values)
        try:
            yield
        finally:
            structlog.contextvars.reset_contextvars(**tokens)

    def snapshot(self) -> dict[str, Any]:
        return structlog.contextvars.get_contextvars()


def current_context() -> dict[str, Any]:
    """Return the scoped logging context active in this thread or task."""
    return structlog.contextvars.get_contextvars()
