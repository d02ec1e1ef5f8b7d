from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_fmt_math.adapters.console.rich_console import RichConsoleAdapter
from lib_fmt_math.application.ports import ConsolePort
from lib_fmt_math.config import ConsoleSettings
from lib_fmt_math.domain.levels import LogLevel

LINE = "[2025-09-23 12:00:00] [INFO] hello [bold]world[/bold] :smile:"


def _terminal_console() -> Console:
    return Console(file=StringIO(), force_terminal=True, color_system="standard", width=200)


def test_adapter_satisfies_console_port(record_console: Console) -> None:
    assert isinstance(RichConsoleAdapter(console=record_console), ConsolePort)


def test_adapter_prints_line_verbatim(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(LINE, level="INFO")
    assert record_console.file.getvalue() == LINE + "\n"


@pytest.mark.parametrize("level", ["INFO", "WARN", "error", "custom", ""])
def test_adapter_text_is_independent_of_level(record_console: Console, level: str) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(LINE, level=level)
    assert record_console.file.getvalue() == LINE + "\n"


def test_adapter_does_not_wrap_long_lines(record_console: Console) -> None:
    line = "[2025-09-23 12:00:00] [INFO] " + "x" * 500
    RichConsoleAdapter(console=record_console).emit(line, level="INFO")
    assert record_console.file.getvalue() == line + "\n"


@pytest.mark.parametrize("payload", ["tab\there", "carriage\rreturn", "bell\x07back\bvt\x0bff\x0c"])
def test_adapter_keeps_tabs_and_control_characters(record_console: Console, payload: str) -> None:
    line = f"[2025-09-23 12:00:00] [INFO] {payload}"
    RichConsoleAdapter(console=record_console).emit(line, level="INFO")
    assert record_console.file.getvalue() == line + "\n"


def test_adapter_keeps_control_characters_for_unstyled_terminal_lines() -> None:
    console = _terminal_console()
    RichConsoleAdapter(console=console).emit("[x] [AUDIT] a\tb\rc", level="AUDIT")
    assert console.file.getvalue() == "[x] [AUDIT] a\tb\rc\n"


def test_adapter_applies_style_for_known_tags() -> None:
    console = _terminal_console()
    RichConsoleAdapter(console=console).emit("[x] [ERROR] boom", level="ERROR")
    output = console.file.getvalue()
    assert "\x1b[" in output
    assert "boom" in output


def test_adapter_respects_no_color_setting() -> None:
    console = _terminal_console()
    adapter = RichConsoleAdapter(console=console, settings=ConsoleSettings(no_color=True))
    adapter.emit("[x] [ERROR] boom", level="ERROR")
    assert console.file.getvalue() == "[x] [ERROR] boom\n"


def test_adapter_accepts_style_overrides() -> None:
    console = _terminal_console()
    adapter = RichConsoleAdapter(console=console, styles={LogLevel.INFO: "green", "audit": "magenta"})
    adapter.emit("[x] [AUDIT] seen", level="AUDIT")
    assert "\x1b[35m" in console.file.getvalue()


def test_default_console_writes_to_current_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    adapter = RichConsoleAdapter(settings=ConsoleSettings())
    adapter.emit(LINE, level="INFO")
    captured = capsys.readouterr()
    assert captured.out == LINE + "\n"
    assert captured.err == ""
