from __future__ import annotations

"""Environment driven defaults for console logger factories."""

import typing as t

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .static import ENV_PREFIX
from .types import LogLevel


class ConsoleLoggerSettings(BaseSettings):
    """
    Console Logger Settings

    Every field can be set through a ``CONLOG_`` prefixed environment variable,
    e.g. ``CONLOG_MIN_LEVEL=warn`` or ``CONLOG_SHOW_TIMESTAMPS=1``.
    """

    colored: bool = True
    min_level: LogLevel = LogLevel.DEBUG
    show_timestamps: bool = False
    force_color: bool = False

    class Config:
        env_prefix = ENV_PREFIX
        case_sensitive = False
        extra = 'ignore'

    @field_validator('min_level', mode = 'before')
    @classmethod
    def validate_min_level(cls, v: t.Any) -> LogLevel:
        """
        Accepts level names as well as numbers
        """
        return LogLevel.parse(v)


__all__ = [
    "ConsoleLoggerSettings",
]
