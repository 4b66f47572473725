from __future__ import annotations

"""Value types shared by the factory, its loggers and the filter chain."""

import dataclasses
import typing as t
from enum import IntEnum

from .errors import InvalidConfiguration, UnknownLogLevel
from .static import LEVEL_ALIASES, LEVEL_LABELS


class LogLevel(IntEnum):
    """
    Ordered log levels, the numeric value drives the minimum level gate
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    @property
    def label(self) -> str:
        """
        Returns the label used in the output line
        """
        return level_label(self)

    @classmethod
    def parse(cls, value: t.Union['LogLevel', int, str]) -> 'LogLevel':
        """
        Resolves a level from a member, its numeric value or its (case-insensitive) name
        """
        if isinstance(value, cls): return value
        if isinstance(value, bool):
            raise InvalidConfiguration(f"Invalid log level: {value!r}", setting = 'min_level', value = value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidConfiguration(f"Invalid log level: {value!r}", setting = 'min_level', value = value) from e
        if isinstance(value, str):
            key = value.strip().upper()
            if key in LEVEL_ALIASES:
                return cls(LEVEL_ALIASES[key])
            if key.isdigit():
                return cls.parse(int(key))
        raise InvalidConfiguration(f"Invalid log level: {value!r}", setting = 'min_level', value = value)


def level_label(level: int) -> str:
    """Returns the fixed output label for ``level``."""
    try:
        return LEVEL_LABELS[int(level)]
    except (KeyError, TypeError, ValueError) as e:
        raise UnknownLogLevel(level) from e


@dataclasses.dataclass(frozen = True)
class LogStatement:
    """
    One pending log event, handed to the filters

    Attributes:
        level: The level of this log statement
        text: The text, possibly including formatting placeholders
        args: The values to use for string interpolation
    """

    level: LogLevel
    text: str
    args: t.Tuple[t.Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.args, tuple):
            object.__setattr__(self, 'args', tuple(self.args))


Filter = t.Callable[[LogStatement], bool]
TypeIdentifier = t.Union[type, str, t.Any]


def type_full_name(type_identifier: TypeIdentifier) -> str:
    """
    Returns the full name used to identify a logger in its output

    Classes render as ``module.QualName`` (builtins drop the module),
    strings are used verbatim and any other object is named after its class.
    """
    if isinstance(type_identifier, str): return type_identifier
    if not isinstance(type_identifier, type):
        type_identifier = type(type_identifier)
    module = getattr(type_identifier, '__module__', None)
    qualname = getattr(type_identifier, '__qualname__', type_identifier.__name__)
    if not module or module == 'builtins': return qualname
    return f'{module}.{qualname}'


def cache_key(type_identifier: TypeIdentifier) -> t.Union[type, str]:
    """Returns the key a logger is cached under."""
    if isinstance(type_identifier, (type, str)): return type_identifier
    return type(type_identifier)


__all__ = [
    "LogLevel",
    "LogStatement",
    "Filter",
    "TypeIdentifier",
    "level_label",
    "type_full_name",
    "cache_key",
]
