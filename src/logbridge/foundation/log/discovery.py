"""Entry-point-based discovery of the installed logger factory.

Backend packages register a :class:`~logbridge.foundation.log.ports.LoggerFactory`
under the ``logbridge.logger_factories`` entry-point group. Application code
asks for a logger by namespace without importing any backend.

Example:
    >>> from logbridge.foundation.log.discovery import get_logger
    >>> log = get_logger("billing")
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

from logbridge.foundation.log.exceptions import NoLoggerFactoryError

if TYPE_CHECKING:
    from logbridge.foundation.log.ports import Logger, LoggerFactory

logger = logging.getLogger(__name__)

LOGGER_FACTORY_GROUP = "logbridge.logger_factories"


def get_logger_factory(
    name: str | None = None,
    *,
    group: str = LOGGER_FACTORY_GROUP,
) -> LoggerFactory:
    """Load and instantiate a registered logger factory.

    Entry points are tried in installation order. The loaded object may be a
    factory class (instantiated with no arguments) or a ready factory
    instance. Entry points that fail to load are logged and skipped.

    Args:
        name: Entry point name to select. If None, the first loadable one wins.
        group: The entry point group to search.

    Returns:
        A logger factory instance.

    Raises:
        NoLoggerFactoryError: If no matching entry point could be loaded.
    """
    for ep in entry_points(group=group):
        if name is not None and ep.name != name:
            continue
        try:
            loaded = ep.load()
        except Exception:
            logger.exception("Failed to load logger factory %s:%s", group, ep.name)
            continue
        factory = loaded() if isinstance(loaded, type) else loaded
        logger.debug("Loaded logger factory %s:%s", group, ep.name)
        return factory  # type: ignore[no-any-return]

    raise NoLoggerFactoryError(group, name)


def get_logger(namespace: str, *, factory_name: str | None = None) -> Logger:
    """Create a logger for ``namespace`` from the discovered factory."""
    return get_logger_factory(factory_name).create_logger(namespace)
