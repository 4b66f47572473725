from typing import Any, Optional


class ConlogError(Exception):
    """Base class for every error raised by conlog"""


class InvalidConfiguration(ConlogError, ValueError):
    """Describes a rejected configuration value"""

    def __init__(self, msg: str, setting: Optional[str] = None, value: Any = None) -> None:
        super().__init__(msg)
        self.setting = setting
        """The name of the setting that was being assigned"""

        self.value = value
        """The value that was rejected"""


class UnknownLogLevel(ConlogError, LookupError):
    """Describes a level value outside of the known levels"""

    def __init__(self, level: Any) -> None:
        super().__init__(f"Unknown log level: {level!r}")
        self.level = level
        """The offending level value"""
