"""Logbridge Foundation Log -- backend-agnostic logging and tracing facade.

Provides severity levels, typed log values, key/value entries, the
``Logger`` / ``LoggerFactory`` ports and discovery of an installed backend.
"""

from logbridge.foundation.log.discovery import (
    LOGGER_FACTORY_GROUP,
    get_logger,
    get_logger_factory,
)
from logbridge.foundation.log.exceptions import (
    InvalidLogEntryError,
    LazyResolutionError,
    LogFacadeError,
    NoLoggerFactoryError,
)
from logbridge.foundation.log.level import Level
from logbridge.foundation.log.ports import Logger, LoggerFactory
from logbridge.foundation.log.values import (
    Boolean,
    Byte,
    Double,
    Float,
    Integer,
    Lazy,
    LogEntry,
    Long,
    Opaque,
    Scalar,
    Short,
    String,
    Value,
    coerce,
    render,
    resolve,
    to_underlying,
)

__all__ = [
    "LOGGER_FACTORY_GROUP",
    "Boolean",
    "Byte",
    "Double",
    "Float",
    "Integer",
    "InvalidLogEntryError",
    "Lazy",
    "LazyResolutionError",
    "Level",
    "LogEntry",
    "LogFacadeError",
    "Logger",
    "LoggerFactory",
    "Long",
    "NoLoggerFactoryError",
    "Opaque",
    "Scalar",
    "Short",
    "String",
    "Value",
    "coerce",
    "get_logger",
    "get_logger_factory",
    "render",
    "resolve",
    "to_underlying",
]
