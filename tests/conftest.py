from __future__ import annotations

from datetime import datetime
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_fmt_math import config


class FixedClock:
    """Clock port returning a constant timestamp."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class RecordingConsole:
    """Console port keeping every emitted line in memory."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def emit(self, line: str, *, level: str = "") -> None:
        self.lines.append((line, level))


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep Rich from injecting ANSI codes because of the CI environment."""

    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", config.FORCE_COLOR_ENV_VAR, config.NO_COLOR_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2025, 3, 4, 5, 6, 7))


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()
