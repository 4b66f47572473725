from __future__ import annotations

"""
Logger factories.

:class:`ConsoleLoggerFactory` owns the configuration (colors, minimum level,
timestamps and filters) and a cache holding one :class:`ConsoleLogger` per type.
"""

import typing as t

from loguru import logger

from .cache import LoggerCache
from .colors import LoggingColors, validate_colors
from .config import ConsoleLoggerSettings
from .filters import FilterChain
from .logger import ConsoleLogger
from .sink import ConsoleSink
from .types import Filter, LogLevel, LogStatement, TypeIdentifier, cache_key


class ConsoleLoggerFactory:
    """
    Logger factory that logs stuff to the console

    Changing :attr:`min_level` or :attr:`show_timestamps` discards every cached
    logger. Loggers handed out earlier keep working: they read the minimum
    level from the factory on each call but keep the timestamp flag and the
    palette they were built with.
    """

    def __init__(
        self,
        colored: bool = True,
        *,
        min_level: t.Union[LogLevel, int, str] = LogLevel.DEBUG,
        show_timestamps: bool = False,
        colors: t.Optional[LoggingColors] = None,
        filters: t.Optional[t.Iterable[Filter]] = None,
        stream: t.Optional[t.TextIO] = None,
        force_color: bool = False,
    ):
        self._colored = bool(colored)
        self._force_color = bool(force_color)
        self._colors = validate_colors(colors) if colors is not None else LoggingColors()
        self._min_level = LogLevel.parse(min_level)
        self._show_timestamps = bool(show_timestamps)
        self._filters = FilterChain(filters)
        self._sink = ConsoleSink(stream)
        self._loggers: LoggerCache[t.Union[type, str], ConsoleLogger] = LoggerCache(name = type(self).__name__)

    @classmethod
    def from_settings(
        cls,
        settings: t.Optional[ConsoleLoggerSettings] = None,
        **kwargs: t.Any,
    ) -> 'ConsoleLoggerFactory':
        """
        Creates a factory from :class:`ConsoleLoggerSettings`, read from the
        environment when not given. Keyword arguments override the settings.
        """
        if settings is None: settings = ConsoleLoggerSettings()
        options = {
            'colored': settings.colored,
            'min_level': settings.min_level,
            'show_timestamps': settings.show_timestamps,
            'force_color': settings.force_color,
        }
        options.update(kwargs)
        colored = options.pop('colored')
        return cls(colored, **options)

    @property
    def colored(self) -> bool:
        return self._colored

    @property
    def force_color(self) -> bool:
        return self._force_color

    @property
    def sink(self) -> ConsoleSink:
        return self._sink

    @property
    def stream(self) -> t.TextIO:
        return self._sink.stream

    @property
    def cache(self) -> LoggerCache[t.Union[type, str], ConsoleLogger]:
        return self._loggers

    @property
    def colors(self) -> LoggingColors:
        """
        Gets or sets the colors to use when logging
        """
        return self._colors

    @colors.setter
    def colors(self, value: LoggingColors) -> None:
        self._colors = validate_colors(value)

    @property
    def min_level(self) -> LogLevel:
        """
        Gets or sets the minimum logging level to output to the console
        """
        return self._min_level

    @min_level.setter
    def min_level(self, value: t.Union[LogLevel, int, str]) -> None:
        self._min_level = LogLevel.parse(value)
        self._loggers.clear()

    @property
    def show_timestamps(self) -> bool:
        """
        Gets or sets whether timestamps should be shown when logging
        """
        return self._show_timestamps

    @show_timestamps.setter
    def show_timestamps(self, value: bool) -> None:
        self._show_timestamps = bool(value)
        self._loggers.clear()

    @property
    def filters(self) -> FilterChain:
        """
        Gets the filters each log statement is passed through in order to
        decide whether it should be output to the console
        """
        return self._filters

    def get_logger(self, type_identifier: TypeIdentifier) -> ConsoleLogger:
        """
        Gets a logger for logging stuff from within the specified type
        """
        return self._loggers.get_or_create(
            cache_key(type_identifier),
            lambda: self._build_logger(type_identifier),
        )

    def _build_logger(self, type_identifier: TypeIdentifier) -> ConsoleLogger:
        new_logger = ConsoleLogger(cache_key(type_identifier), self._colors, self, self._show_timestamps)
        logger.trace(f"Built console logger for {new_logger.name}")
        return new_logger

    def is_aborted_by_filter(self, statement: LogStatement) -> bool:
        return self._filters.is_aborted(statement)

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(colored={self._colored!r}, min_level={self._min_level.name}, '
            f'show_timestamps={self._show_timestamps!r}, filters={len(self._filters)}, loggers={len(self._loggers)})'
        )


class NullLogger:
    """
    Logger that accepts every call and writes nothing
    """

    def __init__(self, type_identifier: TypeIdentifier = None):
        self.type_identifier = type_identifier

    def debug(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def info(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def warn(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def warning(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def error(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def exception(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def log(self, *args: t.Any, **kwargs: t.Any) -> None: ...


class NullLoggerFactory:
    """
    Factory handing out loggers that discard everything
    """

    def __init__(self):
        self._logger = NullLogger()

    def get_logger(self, type_identifier: TypeIdentifier) -> NullLogger:
        return self._logger


__all__ = [
    "ConsoleLoggerFactory",
    "NullLogger",
    "NullLoggerFactory",
]
