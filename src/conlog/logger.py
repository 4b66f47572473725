from __future__ import annotations

"""The per-type console logger."""

import os
import threading
import traceback
import typing as t
from datetime import datetime

from .static import LINE_FORMAT, RENDER_FAILURE_TEMPLATE, TIMESTAMP_FORMAT, TIMESTAMPED_LINE_FORMAT
from .types import LogLevel, LogStatement, TypeIdentifier, level_label, type_full_name

if t.TYPE_CHECKING:
    from .colors import LoggingColors
    from .factory import ConsoleLoggerFactory


def safe_str(value: t.Any) -> str:
    """Returns ``str(value)``, falling back to the default repr if that raises."""
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def describe_exception(exc: BaseException) -> str:
    """Returns the full description of ``exc``, traceback included."""
    return ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip('\n')


def render_message(message: str, args: t.Sequence[t.Any]) -> t.Tuple[bool, str]:
    """
    Interpolates ``args`` into ``message``

    Returns a ``(success, text)`` pair instead of raising on a mismatch
    between the template and its arguments.
    """
    try:
        return True, message.format(*args)
    except Exception:
        return False, message


class ConsoleLogger:
    """
    Logger bound to one type, writing to its factory's console

    The palette and the timestamp flag are fixed when the logger is built, the
    minimum level and the filters are read from the factory on every call.
    """

    def __init__(
        self,
        type_identifier: TypeIdentifier,
        colors: 'LoggingColors',
        factory: 'ConsoleLoggerFactory',
        show_timestamps: bool,
    ):
        self.type_identifier = type_identifier
        self.name = type_full_name(type_identifier)
        self._colors = colors
        self._factory = factory
        self._show_timestamps = show_timestamps
        self._line_format = TIMESTAMPED_LINE_FORMAT if show_timestamps else LINE_FORMAT

    @property
    def colors(self) -> 'LoggingColors':
        return self._colors

    @property
    def factory(self) -> 'ConsoleLoggerFactory':
        return self._factory

    @property
    def show_timestamps(self) -> bool:
        return self._show_timestamps

    def debug(self, message: str, *args: t.Any) -> None:
        """
        Log ``message.format(*args)`` with severity ``'DEBUG'``.
        """
        self._log(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: t.Any) -> None:
        """
        Log ``message.format(*args)`` with severity ``'INFO'``.
        """
        self._log(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: t.Any) -> None:
        """
        Log ``message.format(*args)`` with severity ``'WARN'``.
        """
        self._log(LogLevel.WARN, message, args)

    warning = warn

    def error(self, message: t.Union[str, BaseException], *args: t.Any) -> None:
        """
        Log ``message.format(*args)`` with severity ``'ERROR'``.

        When ``message`` is an exception this behaves like :meth:`exception`.
        """
        if isinstance(message, BaseException):
            if args: return self.exception(message, *args)
            return self.exception(message, '')
        self._log(LogLevel.ERROR, message, args)

    def exception(self, exc: BaseException, message: str = '', *args: t.Any) -> None:
        """
        Log ``message.format(*args)`` followed by the description of ``exc``
        with severity ``'ERROR'``.
        """
        text = safe_str(message)
        ok, rendered = render_message(text, args)
        if not ok: self._report_render_failure(text, args)
        self._log(LogLevel.ERROR, rendered + os.linesep + describe_exception(exc), (), rendered = True)

    def log(self, level: t.Union[LogLevel, int, str], message: str, *args: t.Any) -> None:
        """
        Log ``message.format(*args)`` with severity ``level``.
        """
        self._log(LogLevel.parse(level), message, args)

    def _log(self, level: LogLevel, message: t.Any, args: t.Tuple[t.Any, ...], rendered: bool = False) -> None:
        text = message if isinstance(message, str) else safe_str(message)
        factory = self._factory
        if level < factory.min_level: return
        if factory.is_aborted_by_filter(LogStatement(level, text, args)): return

        if factory.colored:
            sink = factory.sink
            with sink.lock, self._colors.for_level(level).enter(sink, force = factory.force_color):
                ok = self._write(level, text, args, rendered)
        else:
            ok = self._write(level, text, args, rendered)
        if not ok: self._report_render_failure(text, args)

    def _write(self, level: LogLevel, message: str, args: t.Tuple[t.Any, ...], rendered: bool) -> bool:
        """
        Renders and writes one line, returning ``False`` if the message could not be rendered
        """
        level_string = level_label(level)
        if rendered:
            text = message
        else:
            ok, text = render_message(message, args)
            if not ok: return False
        line = self._line_format.format(
            timestamp = datetime.now().strftime(TIMESTAMP_FORMAT) if self._show_timestamps else '',
            type_name = self.name,
            level = level_string,
            thread_name = threading.current_thread().name,
            message = text,
        )
        self._factory.sink.write_line(line)
        return True

    def _report_render_failure(self, message: str, args: t.Sequence[t.Any]) -> None:
        self._log(LogLevel.WARN, RENDER_FAILURE_TEMPLATE, (message, ', '.join(safe_str(a) for a in args)))

    def __repr__(self) -> str:
        return f'ConsoleLogger(name={self.name!r}, show_timestamps={self._show_timestamps!r})'


__all__ = [
    "ConsoleLogger",
    "describe_exception",
    "render_message",
]
