from __future__ import annotations

"""Shared fixtures for the conlog tests."""

import io
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[2] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from conlog import ConsoleLoggerFactory  # noqa: E402


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def factory(buffer: io.StringIO) -> ConsoleLoggerFactory:
    """Uncolored factory writing into ``buffer``."""
    return ConsoleLoggerFactory(colored=False, stream=buffer)


@pytest.fixture(autouse=True)
def _clear_conlog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ('CONLOG_COLORED', 'CONLOG_MIN_LEVEL', 'CONLOG_SHOW_TIMESTAMPS', 'CONLOG_FORCE_COLOR'):
        monkeypatch.delenv(key, raising=False)
