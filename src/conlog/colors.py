from __future__ import annotations

"""
Per-level console colors.

Colors are written as loguru markup (``green``, ``fg #DC2F02``, ``bg red``) and
turned into ANSI sequences with loguru's colorizer. ``loguru._colorizer`` is
private, hence the upper bound on loguru in pyproject.toml.
"""

import contextlib
import typing as t

from loguru import logger
from loguru._colorizer import Colorizer

from .errors import InvalidConfiguration
from .static import DEFAULT_LEVEL_COLORS, RESET_COLOR
from .types import LogLevel

if t.TYPE_CHECKING:
    from .sink import ConsoleSink


class ColorSetting:
    """
    A foreground (and optional background) color that can be entered as a scope
    """

    __slots__ = ('foreground', 'background', 'ansi')

    def __init__(self, foreground: t.Optional[str] = None, background: t.Optional[str] = None):
        self.foreground = foreground
        self.background = background
        self.ansi = self._ansify(self.markup)

    @property
    def markup(self) -> str:
        """
        Returns the loguru markup for this setting
        """
        markup = ''
        if self.foreground:
            markup += f'<{self.foreground}>'
        if self.background:
            background = self.background if self.background.startswith('bg ') else f'bg {self.background}'
            markup += f'<{background}>'
        return markup

    @staticmethod
    def _ansify(markup: str) -> str:
        if not markup: return ''
        try:
            return Colorizer.ansify(markup)
        except ValueError as e:
            raise InvalidConfiguration(f"Invalid color markup: {markup!r}", setting = 'colors', value = markup) from e

    @contextlib.contextmanager
    def enter(self, sink: 'ConsoleSink', force: bool = False) -> t.Iterator['ColorSetting']:
        """
        Colors everything written to ``sink`` inside the block, restoring the
        console appearance on exit even when the block raises.

        Consoles that are not TTYs are left untouched unless ``force`` is set.
        """
        active = bool(self.ansi) and (force or sink.isatty())
        if active: active = sink.write_raw(self.ansi)
        try:
            yield self
        finally:
            if active: sink.write_raw(RESET_COLOR)

    def __eq__(self, other: t.Any) -> bool:
        if not isinstance(other, ColorSetting): return NotImplemented
        return (self.foreground, self.background) == (other.foreground, other.background)

    def __hash__(self) -> int:
        return hash((self.foreground, self.background))

    def __repr__(self) -> str:
        return f'ColorSetting(foreground={self.foreground!r}, background={self.background!r})'


def validate_setting(name: str, value: t.Any) -> ColorSetting:
    """
    Returns ``value`` if it is a :class:`ColorSetting`, raising otherwise
    """
    if not isinstance(value, ColorSetting):
        raise InvalidConfiguration(
            f"Color for {name} must be a ColorSetting, got {type(value).__name__}",
            setting = f'colors.{name}', value = value,
        )
    return value


class _LevelColor:
    """
    Palette entry that only ever holds a ColorSetting
    """

    def __set_name__(self, owner: type, name: str):
        self.name = name
        self.attr = f'_{name}'

    def __get__(self, instance: t.Optional['LoggingColors'], owner: type):
        if instance is None: return self
        return getattr(instance, self.attr)

    def __set__(self, instance: 'LoggingColors', value: t.Any) -> None:
        setattr(instance, self.attr, validate_setting(self.name, value))


class LoggingColors:
    """
    The color settings used for each level

    ``None`` in the constructor picks the default for that level; assigning
    anything but a :class:`ColorSetting` afterwards raises.
    """

    debug = _LevelColor()
    info = _LevelColor()
    warn = _LevelColor()
    error = _LevelColor()

    def __init__(
        self,
        debug: t.Optional[ColorSetting] = None,
        info: t.Optional[ColorSetting] = None,
        warn: t.Optional[ColorSetting] = None,
        error: t.Optional[ColorSetting] = None,
    ):
        self.debug = ColorSetting(DEFAULT_LEVEL_COLORS['debug']) if debug is None else debug
        self.info = ColorSetting(DEFAULT_LEVEL_COLORS['info']) if info is None else info
        self.warn = ColorSetting(DEFAULT_LEVEL_COLORS['warn']) if warn is None else warn
        self.error = ColorSetting(DEFAULT_LEVEL_COLORS['error']) if error is None else error

    @classmethod
    def from_markup(cls, **markup: t.Union[str, t.Tuple[str, str]]) -> 'LoggingColors':
        """
        Builds a palette from markup strings keyed by level name

        >>> LoggingColors.from_markup(info = 'cyan', error = ('white', 'red'))
        """
        settings: t.Dict[str, ColorSetting] = {}
        for name, value in markup.items():
            key = LogLevel.parse(name).name.lower()
            settings[key] = ColorSetting(*value) if isinstance(value, tuple) else ColorSetting(value)
        return cls(**settings)

    def for_level(self, level: LogLevel) -> ColorSetting:
        """
        Returns the color setting for ``level``
        """
        return getattr(self, LogLevel(level).name.lower())

    def __repr__(self) -> str:
        return f'LoggingColors(debug={self.debug!r}, info={self.info!r}, warn={self.warn!r}, error={self.error!r})'


def validate_colors(colors: t.Any) -> LoggingColors:
    """
    Returns ``colors`` if it is a usable palette, raising otherwise
    """
    if colors is None:
        logger.debug("Rejected attempt to set logging colors to None")
        raise InvalidConfiguration("Attempted to set logging colors to None", setting = 'colors')
    if not isinstance(colors, LoggingColors):
        raise InvalidConfiguration(
            f"Logging colors must be LoggingColors, got {type(colors).__name__}",
            setting = 'colors', value = colors,
        )
    return colors


__all__ = [
    "ColorSetting",
    "LoggingColors",
    "validate_setting",
    "validate_colors",
]
