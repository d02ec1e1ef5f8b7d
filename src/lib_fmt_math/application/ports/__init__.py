"""Protocols separating the formatter from its console and clock."""

from __future__ import annotations

from .console import ConsolePort
from .time import ClockPort, SystemClock

__all__ = ["ClockPort", "ConsolePort", "SystemClock"]
