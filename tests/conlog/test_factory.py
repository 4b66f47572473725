from __future__ import annotations

import io
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

import conlog
from conlog import (
    ColorSetting,
    ConsoleLoggerFactory,
    ConsoleLoggerSettings,
    InvalidConfiguration,
    LoggingColors,
    LogLevel,
    NullLoggerFactory,
)


class Alpha:
    pass


class Beta:
    pass


def test_get_logger_returns_cached_instance(factory: ConsoleLoggerFactory) -> None:
    first = factory.get_logger(Alpha)

    assert factory.get_logger(Alpha) is first
    assert len(factory.cache) == 1


def test_get_logger_returns_distinct_instances_per_type(factory: ConsoleLoggerFactory) -> None:
    alpha = factory.get_logger(Alpha)
    beta = factory.get_logger(Beta)

    assert alpha is not beta
    assert alpha.name.endswith('.Alpha')
    assert beta.name.endswith('.Beta')


def test_instances_share_the_logger_of_their_class(factory: ConsoleLoggerFactory) -> None:
    assert factory.get_logger(Alpha()) is factory.get_logger(Alpha)


def test_string_identifiers_are_used_verbatim(factory: ConsoleLoggerFactory) -> None:
    log = factory.get_logger('billing.Invoices')

    assert log.name == 'billing.Invoices'
    assert factory.get_logger('billing.Invoices') is log


@pytest.mark.parametrize('attribute, value', [('min_level', LogLevel.WARN), ('show_timestamps', True)])
def test_level_and_timestamp_changes_invalidate_the_cache(
    factory: ConsoleLoggerFactory, attribute: str, value: object
) -> None:
    before = factory.get_logger(Alpha)
    factory.get_logger(Beta)

    setattr(factory, attribute, value)

    assert len(factory.cache) == 0
    assert factory.get_logger(Alpha) is not before


def test_color_changes_keep_the_cache(factory: ConsoleLoggerFactory) -> None:
    before = factory.get_logger(Alpha)
    palette = LoggingColors(info=ColorSetting('cyan'))

    factory.colors = palette

    assert factory.colors is palette
    assert factory.get_logger(Alpha) is before
    assert before.colors is not palette


def test_setting_colors_to_none_is_rejected(factory: ConsoleLoggerFactory) -> None:
    palette = factory.colors

    with pytest.raises(InvalidConfiguration):
        factory.colors = None

    assert factory.colors is palette


def test_setting_colors_to_wrong_type_is_rejected(factory: ConsoleLoggerFactory) -> None:
    palette = factory.colors

    with pytest.raises(InvalidConfiguration):
        factory.colors = {'info': 'green'}

    assert factory.colors is palette


def test_invalid_min_level_keeps_previous_level(factory: ConsoleLoggerFactory) -> None:
    factory.min_level = 'info'

    with pytest.raises(InvalidConfiguration):
        factory.min_level = 'loud'

    assert factory.min_level is LogLevel.INFO


def test_concurrent_get_logger_creates_one_entry(factory: ConsoleLoggerFactory) -> None:
    workers = 16
    barrier = threading.Barrier(workers)

    def fetch(_: int):
        barrier.wait()
        return factory.get_logger(Alpha)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        loggers = list(pool.map(fetch, range(workers)))

    assert len(factory.cache) == 1
    assert all(log is loggers[0] for log in loggers)


def test_factories_do_not_share_caches(buffer: io.StringIO) -> None:
    first = ConsoleLoggerFactory(colored=False, stream=buffer)
    second = ConsoleLoggerFactory(colored=False, stream=buffer)

    assert first.get_logger(Alpha) is not second.get_logger(Alpha)
    first.min_level = LogLevel.ERROR
    assert Alpha in second.cache


def test_from_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('CONLOG_COLORED', 'false')
    monkeypatch.setenv('CONLOG_MIN_LEVEL', 'warning')
    monkeypatch.setenv('CONLOG_SHOW_TIMESTAMPS', 'true')

    factory = ConsoleLoggerFactory.from_settings()

    assert factory.colored is False
    assert factory.min_level is LogLevel.WARN
    assert factory.show_timestamps is True


def test_from_settings_overrides(buffer: io.StringIO) -> None:
    settings = ConsoleLoggerSettings(min_level='error')

    factory = ConsoleLoggerFactory.from_settings(settings, colored=False, stream=buffer)

    assert factory.min_level is LogLevel.ERROR
    assert factory.colored is False
    assert factory.stream is buffer


def test_default_factory_is_replaceable(buffer: io.StringIO) -> None:
    factory = ConsoleLoggerFactory(colored=False, stream=buffer)
    conlog.set_default_factory(factory)
    try:
        conlog.get_logger('jobs.Worker').info('ready')
        assert conlog.get_default_factory() is factory
    finally:
        conlog.set_default_factory(None)

    assert buffer.getvalue() == 'jobs.Worker INFO (MainThread): ready\n'


def test_null_logger_factory_writes_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    log = NullLoggerFactory().get_logger(Alpha)

    log.info('hello {0}', 'world')
    log.error(ValueError('nope'), 'failed')

    assert capsys.readouterr().out == ''
