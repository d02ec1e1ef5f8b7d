from __future__ import annotations

import logging

import pytest

from lib_fmt_math.domain.levels import LogLevel, level_tag


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARNING),
        ("warn", LogLevel.WARNING),
        (" error ", LogLevel.ERROR),
        ("CRITICAL", LogLevel.CRITICAL),
    ],
)
def test_from_name_accepts_names_and_tags(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize("level", LogLevel)
def test_python_level_round_trip(level: LogLevel) -> None:
    assert level.to_python_level() == getattr(logging, level.name)
    assert LogLevel.from_python_level(level.to_python_level()) is level


@pytest.mark.parametrize("number", [-5, 5, 15, 55])
def test_from_python_level_rejects_non_standard_levels(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_python_level(number)


@pytest.mark.parametrize(
    "level, tag",
    [
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARN"),
        (LogLevel.ERROR, "ERROR"),
        (LogLevel.CRITICAL, "CRITICAL"),
    ],
)
def test_level_tag_table(level: LogLevel, tag: str) -> None:
    assert level.tag == tag
    assert level_tag(level) == tag


@pytest.mark.parametrize("raw, expected", [("WARN", "WARN"), ("notice", "notice"), ("  AUDIT ", "AUDIT"), ("", "")])
def test_level_tag_keeps_free_text(raw: str, expected: str) -> None:
    assert level_tag(raw) == expected


def test_severity_matches_lowercase_name() -> None:
    assert [level.severity for level in LogLevel] == ["debug", "info", "warning", "error", "critical"]
