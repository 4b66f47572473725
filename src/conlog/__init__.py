from __future__ import annotations

"""Public façade for conlog.

conlog hands out one console logger per type. Each logger writes leveled,
optionally colored and timestamped lines, passing every statement through a
minimum level gate and a chain of filters first::

    from conlog import ConsoleLoggerFactory

    factory = ConsoleLoggerFactory(colored = True, show_timestamps = True)
    log = factory.get_logger(MyService)
    log.info("Processed {0} items", 42)

The package reports its own housekeeping through loguru and is disabled by
default; call ``loguru.logger.enable("conlog")`` to see it.
"""

import threading
import typing as t

from loguru import logger as _logger

from .cache import LoggerCache
from .colors import ColorSetting, LoggingColors
from .config import ConsoleLoggerSettings
from .errors import ConlogError, InvalidConfiguration, UnknownLogLevel
from .factory import ConsoleLoggerFactory, NullLogger, NullLoggerFactory
from .filters import FilterChain
from .logger import ConsoleLogger
from .sink import ConsoleSink
from .types import Filter, LogLevel, LogStatement, TypeIdentifier

_logger.disable("conlog")

_lock = threading.Lock()
_default_factory: t.Optional[ConsoleLoggerFactory] = None


def get_default_factory() -> ConsoleLoggerFactory:
    """
    Returns the process-wide factory, configured from ``CONLOG_*`` environment variables
    """
    global _default_factory
    if _default_factory is None:
        with _lock:
            if _default_factory is None:
                _default_factory = ConsoleLoggerFactory.from_settings()
    return _default_factory


def set_default_factory(factory: t.Optional[ConsoleLoggerFactory]) -> None:
    """
    Replaces the process-wide factory, ``None`` rebuilds it on next use
    """
    global _default_factory
    with _lock:
        _default_factory = factory


def get_logger(type_identifier: TypeIdentifier) -> ConsoleLogger:
    """
    Gets a logger for ``type_identifier`` from the process-wide factory
    """
    return get_default_factory().get_logger(type_identifier)


__all__ = [
    "ColorSetting",
    "ConlogError",
    "ConsoleLogger",
    "ConsoleLoggerFactory",
    "ConsoleLoggerSettings",
    "ConsoleSink",
    "Filter",
    "FilterChain",
    "InvalidConfiguration",
    "LogLevel",
    "LogStatement",
    "LoggerCache",
    "LoggingColors",
    "NullLogger",
    "NullLoggerFactory",
    "TypeIdentifier",
    "UnknownLogLevel",
    "get_default_factory",
    "get_logger",
    "set_default_factory",
]
