"""Typed log values and key/value entries.

A log value is one variant of a closed union. Numeric variants keep the
width they were declared with so backends that distinguish integer and
floating-point attributes can preserve them; everything else is carried as
an opaque payload and rendered to text where a backend needs a string.

``Lazy`` defers computing its value until a backend actually needs it.
Resolution is iterative and depth-bounded.

Example:
    >>> from logbridge.foundation.log.values import Integer, Lazy, LogEntry, resolve
    >>> entry = LogEntry("retries", Lazy(lambda: Integer(3)))
    >>> resolve(entry.value)
    Integer(value=3)
    >>> LogEntry.of("user_id", 42).value
    Long(value=42)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias, assert_never

from logbridge.foundation.log.exceptions import InvalidLogEntryError, LazyResolutionError

DEFAULT_MAX_LAZY_DEPTH = 64

BYTE_MIN, BYTE_MAX = -(2**7), 2**7 - 1
SHORT_MIN, SHORT_MAX = -(2**15), 2**15 - 1
INTEGER_MIN, INTEGER_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1


def _check_int(variant: str, value: object, lower: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{variant} value must be an int"
        raise InvalidLogEntryError(msg, context={"value": repr(value)})
    if not lower <= value <= upper:
        msg = f"{variant} value out of range [{lower}, {upper}]"
        raise InvalidLogEntryError(msg, context={"value": value})


@dataclass(frozen=True, slots=True)
class Lazy:
    """Value computed on demand by calling ``supplier``.

    The supplier may itself return another ``Lazy``.
    """

    supplier: Callable[[], Value]


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class Byte:
    """Signed 8-bit integer."""

    value: int

    def __post_init__(self) -> None:
        _check_int("Byte", self.value, BYTE_MIN, BYTE_MAX)


@dataclass(frozen=True, slots=True)
class Short:
    """Signed 16-bit integer."""

    value: int

    def __post_init__(self) -> None:
        _check_int("Short", self.value, SHORT_MIN, SHORT_MAX)


@dataclass(frozen=True, slots=True)
class Integer:
    """Signed 32-bit integer."""

    value: int

    def __post_init__(self) -> None:
        _check_int("Integer", self.value, INTEGER_MIN, INTEGER_MAX)


@dataclass(frozen=True, slots=True)
class Long:
    """Signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        _check_int("Long", self.value, LONG_MIN, LONG_MAX)


@dataclass(frozen=True, slots=True)
class Float:
    """Single-precision float, stored as a Python float."""

    value: float


@dataclass(frozen=True, slots=True)
class Double:
    value: float


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class Opaque:
    """Any other object. Backends without a native type for it render ``str(payload)``."""

    payload: Any


Value: TypeAlias = Lazy | Boolean | Byte | Short | Integer | Long | Float | Double | String | Opaque
"""Closed union of every log value variant."""

Scalar: TypeAlias = Boolean | Byte | Short | Integer | Long | Float | Double | String | Opaque
"""A value with all laziness resolved."""

_VALUE_TYPES = (Lazy, Boolean, Byte, Short, Integer, Long, Float, Double, String, Opaque)


def resolve(value: Value, max_depth: int = DEFAULT_MAX_LAZY_DEPTH) -> Scalar:
    """Unwrap ``Lazy`` layers until a concrete variant is reached.

    A supplier that returns a plain Python object instead of a value has
    its result boxed with :func:`coerce`.

    Args:
        value: The value to resolve.
        max_depth: Maximum number of ``Lazy`` layers to evaluate.

    Returns:
        The first non-lazy value in the chain.

    Raises:
        LazyResolutionError: If more than ``max_depth`` lazy layers are found.
    """
    depth = 0
    while isinstance(value, Lazy):
        if depth >= max_depth:
            raise LazyResolutionError(max_depth)
        value = value.supplier()
        depth += 1
    if not isinstance(value, _VALUE_TYPES):
        return coerce(value)  # type: ignore[return-value]
    return value


def to_underlying(value: Value, max_depth: int = DEFAULT_MAX_LAZY_DEPTH) -> Any:
    """Return the raw Python payload carried by ``value``."""
    resolved = resolve(value, max_depth)
    match resolved:
        case Boolean(value=raw) | String(value=raw):
            return raw
        case Byte(value=raw) | Short(value=raw) | Integer(value=raw) | Long(value=raw):
            return raw
        case Float(value=raw) | Double(value=raw):
            return raw
        case Opaque(payload=raw):
            return raw
        case _:
            assert_never(resolved)


def render(value: Value, max_depth: int = DEFAULT_MAX_LAZY_DEPTH) -> str:
    """Render the underlying payload of ``value`` as text."""
    return str(to_underlying(value, max_depth))


def coerce(obj: object) -> Value:
    """Box a plain Python object into the closest value variant.

    Existing values pass through unchanged. ``int`` outside the 64-bit range
    becomes ``Opaque`` so it is rendered rather than truncated.
    """
    if isinstance(obj, _VALUE_TYPES):
        return obj
    match obj:
        case bool():
            return Boolean(obj)
        case int() if LONG_MIN <= obj <= LONG_MAX:
            return Long(obj)
        case float():
            return Double(obj)
        case str():
            return String(obj)
        case _:
            return Opaque(obj)


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A single key/value pair attached to an event, span or scoped context.

    Attributes:
        key: Non-empty attribute name.
        value: The typed value. Plain Python objects are boxed with :func:`coerce`.
    """

    key: str
    value: Value

    def __post_init__(self) -> None:
        if not self.key:
            msg = "Log entry key must not be empty"
            raise InvalidLogEntryError(msg)
        if not isinstance(self.value, _VALUE_TYPES):
            object.__setattr__(self, "value", coerce(self.value))

    @classmethod
    def of(cls, key: str, value: object) -> LogEntry:
        """Build an entry from a plain Python object, boxing it with :func:`coerce`."""
        return cls(key, coerce(value))
