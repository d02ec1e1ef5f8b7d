"""Console port describing line emission contracts.

Purpose
-------
Define the abstraction the formatter writes rendered log lines to, so tests
and hosts can swap the Rich adapter for any sink.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Write one rendered log line to a console."""

    def emit(self, line: str, *, level: str = "") -> None:
        """Write ``line`` followed by a newline; ``level`` may select a style."""


__all__ = ["ConsolePort"]
