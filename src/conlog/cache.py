from __future__ import annotations

"""Thread-safe type to logger mapping."""

import threading
import typing as t

from loguru import logger

KeyT = t.TypeVar('KeyT')
ValueT = t.TypeVar('ValueT')


class LoggerCache(t.Generic[KeyT, ValueT]):
    """
    Memoizes one logger per type identifier

    ``get_or_create`` builds the value while holding the lock, so callers never
    see a half-built logger and concurrent callers for the same key all get the
    single stored instance. ``clear`` takes the same lock, so an entry built
    from settings that are being replaced is always discarded.
    """

    def __init__(self, name: t.Optional[str] = None):
        self.name = name
        self._lock = threading.Lock()
        self._entries: t.Dict[KeyT, ValueT] = {}

    def get(self, key: KeyT) -> t.Optional[ValueT]:
        return self._entries.get(key)

    def get_or_create(self, key: KeyT, build: t.Callable[[], ValueT]) -> ValueT:
        """
        Returns the cached value for ``key``, building and storing it if missing
        """
        value = self._entries.get(key)
        if value is not None: return value
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                value = build()
                self._entries[key] = value
            return value

    def clear(self) -> None:
        """
        Discards every cached entry
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        if count: logger.debug(f"[{self.name}] Cleared {count} cached loggers")

    def keys(self) -> t.List[KeyT]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: t.Any) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'LoggerCache(name={self.name!r}, entries={len(self)})'


__all__ = [
    "LoggerCache",
]
