"""Port for the wall-clock source used by the log-line emitter."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timestamp."""

    def now(self) -> datetime: ...


class SystemClock(ClockPort):
    """Concrete clock returning the local wall-clock time."""

    def now(self) -> datetime:
        """Return the current local time with timezone info."""
        return datetime.now().astimezone()


__all__ = ["ClockPort", "SystemClock"]
