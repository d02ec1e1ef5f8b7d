"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Write rendered log lines to standard output through Rich, colouring known
level tags on interactive terminals while keeping the text byte-identical.

Contents
--------
* :data:`_STYLE_MAP` - default tag-to-style mapping.
* :class:`RichConsoleAdapter` - default sink of :class:`StringFormatter`.

System Role
-----------
Primary human-facing sink. Markup, highlighting, emoji codes and wrapping are
disabled because log lines contain literal ``[...]`` segments.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console

from lib_fmt_math.application.ports.console import ConsolePort
from lib_fmt_math.config import ConsoleSettings, console_settings
from lib_fmt_math.domain.levels import LogLevel


_STYLE_MAP: Mapping[str, str] = {
    LogLevel.DEBUG.tag: "dim",
    LogLevel.INFO.tag: "cyan",
    LogLevel.WARNING.tag: "yellow",
    "WARNING": "yellow",
    LogLevel.ERROR.tag: "red",
    LogLevel.CRITICAL.tag: "bold red",
}


class RichConsoleAdapter(ConsolePort):
    """Print log lines using Rich with optional per-tag styles."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        settings: ConsoleSettings | None = None,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the adapter; without ``console`` one is built from ``settings``.

        A self-built console leaves its output file unset so Rich resolves
        :data:`sys.stdout` on every print.
        """
        resolved = settings if settings is not None else console_settings()
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                force_terminal=True if resolved.force_color else None,
                no_color=resolved.no_color,
                highlight=False,
                emoji=False,
                markup=False,
            )
        self._no_color = resolved.no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            tag = key.tag if isinstance(key, LogLevel) else key.strip().upper()
            merged[tag] = value
        self._style_map = merged

    def emit(self, line: str, *, level: str = "") -> None:
        """Write ``line`` with the style registered for ``level``.

        Unstyled lines (no colour, unknown tag, or a console without a colour
        system) go straight to the console file so tabs and control characters
        reach the stream untouched; only coloured terminal output is rendered
        by Rich.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO())
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit("[2025-01-01 00:00:00] [INFO] a\\tb", level="INFO")
        >>> console.file.getvalue()
        '[2025-01-01 00:00:00] [INFO] a\\tb\\n'
        """
        style = "" if self._no_color else self._style_map.get(level.strip().upper(), "")
        if not style or self._console.color_system is None:
            stream = self._console.file
            stream.write(line + "\n")
            stream.flush()
            return
        self._console.print(
            line,
            style=style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


__all__ = ["RichConsoleAdapter"]
