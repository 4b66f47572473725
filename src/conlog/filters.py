from __future__ import annotations

"""Ordered predicates that can veto a log statement."""

import threading
import typing as t
from collections.abc import MutableSequence

from loguru import logger

from .types import Filter, LogStatement


class FilterChain(MutableSequence):
    """
    The filters each log statement is passed through before it is written

    A statement is blocked if any filter returns ``False``; an empty chain
    lets everything through.
    """

    def __init__(self, filters: t.Optional[t.Iterable[Filter]] = None):
        self._lock = threading.Lock()
        self._filters: t.List[Filter] = list(filters or [])

    def __getitem__(self, index):
        with self._lock:
            return self._filters[index]

    def __setitem__(self, index, value):
        with self._lock:
            self._filters[index] = value

    def __delitem__(self, index):
        with self._lock:
            del self._filters[index]

    def __len__(self) -> int:
        return len(self._filters)

    def insert(self, index: int, value: Filter) -> None:
        with self._lock:
            self._filters.insert(index, value)

    def register(self, func: Filter) -> Filter:
        """
        Appends ``func`` and returns it, so it can be used as a decorator
        """
        self.append(func)
        return func

    def snapshot(self) -> t.Tuple[Filter, ...]:
        with self._lock:
            return tuple(self._filters)

    def allows(self, statement: LogStatement) -> bool:
        """
        Returns ``True`` when every filter accepts the statement

        A filter that raises counts as a rejection.
        """
        for func in self.snapshot():
            try:
                if not func(statement): return False
            except Exception as e:
                logger.opt(exception = e).warning(f"Log filter {func!r} failed, suppressing statement")
                return False
        return True

    def is_aborted(self, statement: LogStatement) -> bool:
        return not self.allows(statement)

    def __repr__(self) -> str:
        return f'FilterChain({list(self.snapshot())!r})'


__all__ = [
    "FilterChain",
]
