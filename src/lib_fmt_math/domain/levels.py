"""Log level abstraction for the tags written by :func:`lib_fmt_math.log`.

Purpose
-------
Offer well-known severities with the short bracketed tags the log-line
emitter writes, while still accepting free-form level strings from callers.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* :func:`level_tag` - normalise a level argument into the text placed inside
  ``[...]``.

System Role
-----------
Used by the formatter to render the level column and by the console adapter to
choose a colour for known tags.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels mirroring the stdlib numeric values."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def tag(self) -> str:
        """Return the tag written between brackets in a log line."""

        return _TAG_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve a case-insensitive level name or tag (``"warn"`` works too)."""
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError:
            pass
        for level, tag in _TAG_TABLE.items():
            if tag == normalized:
                return level
        raise ValueError(f"Unknown log level: {name!r}")

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_TAG_TABLE = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
}


def level_tag(level: str | LogLevel) -> str:
    """Return the text written inside the level brackets.

    Free-form strings pass through unchanged apart from surrounding
    whitespace; enum members use their short tag.

    Examples
    --------
    >>> level_tag(LogLevel.WARNING)
    'WARN'
    >>> level_tag(" notice ")
    'notice'
    """
    if isinstance(level, LogLevel):
        return level.tag
    return str(level).strip()


__all__ = ["LogLevel", "level_tag"]
