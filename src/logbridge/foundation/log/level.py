"""Severity levels for facade events and spans."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Closed, totally ordered set of facade severities.

    Numeric values line up with the stdlib ``logging`` levels so that
    ``Level.INFO > Level.DEBUG`` and ``int(Level.WARN) == logging.WARNING``.
    TRACE sits below DEBUG at 5.
    """

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
