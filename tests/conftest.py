from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from smart_logger import facade
from smart_logger.core.logger import SmartLogger
from smart_logger.core.settings import CONFIG_ENV, MIN_SEVERITY_ENV, LoggerSettings, StaticBuildMode
from smart_logger.core.sinks import MemorySink


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(MIN_SEVERITY_ENV, raising=False)
    facade.reset()
    yield
    facade.reset()


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def make_logger(memory_sink: MemorySink) -> Callable[..., SmartLogger]:
    def _make(*, development: bool = True, **settings: Any) -> SmartLogger:
        return SmartLogger(
            memory_sink,
            settings=LoggerSettings(**settings),
            build_mode=StaticBuildMode(development),
        )

    return _make
