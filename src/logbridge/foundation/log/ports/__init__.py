"""Facade port interfaces.

Ports define the contracts application code logs and traces through.
Implementations (adapters) live in infrastructure packages.
"""

from logbridge.foundation.log.ports.logger import Logger, LoggerFactory

__all__ = ["Logger", "LoggerFactory"]
