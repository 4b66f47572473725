from __future__ import annotations

"""Best-effort console output."""

import sys
import threading
import typing as t

from loguru import logger


class ConsoleSink:
    """
    Writes whole lines to a text stream, defaulting to the current ``sys.stdout``

    Failures to write are swallowed: logging must never crash the caller.
    """

    def __init__(self, stream: t.Optional[t.TextIO] = None):
        self._stream = stream
        self._lock = threading.RLock()

    @property
    def stream(self) -> t.TextIO:
        """
        Returns the stream in use, resolving ``sys.stdout`` lazily
        """
        return self._stream if self._stream is not None else sys.stdout

    @property
    def lock(self) -> threading.RLock:
        """
        Held while a colored line is written so color and text stay together
        """
        return self._lock

    def isatty(self) -> bool:
        try:
            return bool(self.stream.isatty())
        except Exception:
            return False

    def write_raw(self, text: str) -> bool:
        """
        Writes ``text`` as-is, returning whether it was written

        A failing flush does not count as a failed write.
        """
        with self._lock:
            stream = self.stream
            try:
                stream.write(text)
            except Exception as e:
                logger.opt(exception = e).trace("Unable to write to the console")
                return False
            try:
                stream.flush()
            except Exception as e:
                logger.opt(exception = e).trace("Unable to flush the console")
            return True

    def write_line(self, line: str) -> bool:
        """
        Writes one line followed by a newline
        """
        return self.write_raw(f'{line}\n')

    def __repr__(self) -> str:
        return f'ConsoleSink(stream={self._stream!r})'


__all__ = [
    "ConsoleSink",
]
