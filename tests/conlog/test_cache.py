from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from conlog import LoggerCache


def test_get_or_create_builds_once() -> None:
    cache: LoggerCache[str, object] = LoggerCache()
    built: list[object] = []

    def build() -> object:
        built.append(object())
        return built[-1]

    first = cache.get_or_create('a', build)
    second = cache.get_or_create('a', build)

    assert first is second
    assert len(built) == 1
    assert 'a' in cache
    assert cache.keys() == ['a']


def test_clear_discards_everything() -> None:
    cache: LoggerCache[str, int] = LoggerCache()
    cache.get_or_create('a', lambda: 1)
    cache.get_or_create('b', lambda: 2)

    cache.clear()

    assert len(cache) == 0
    assert cache.get('a') is None
    assert cache.get_or_create('a', lambda: 3) == 3


def test_concurrent_creation_and_clear_never_loses_later_entries() -> None:
    cache: LoggerCache[int, object] = LoggerCache()
    barrier = threading.Barrier(8)

    def work(index: int) -> object:
        barrier.wait()
        if index % 2:
            cache.clear()
        return cache.get_or_create(index, object)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(8)))

    cache.get_or_create('after', object)
    assert 'after' in cache
