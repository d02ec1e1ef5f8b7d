"""Value object describing one emitted log line.

Purpose
-------
Capture the ``(timestamp, level, message)`` triple produced by
:meth:`lib_fmt_math.StringFormatter.log` and own its textual rendering.

Contents
--------
* :data:`TIMESTAMP_FORMAT` - ``strftime`` pattern for the timestamp column.
* :class:`LogRecord` - immutable record with :meth:`LogRecord.render`.

System Role
-----------
Domain layer; records are ephemeral and are serialised to the console port
immediately after creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record.

    Attributes
    ----------
    timestamp:
        Wall-clock time of the call; rendered to second precision.
    level:
        Tag written between brackets (``INFO``, ``WARN``, or any caller text).
    message:
        Already formatted message, possibly a ``Format error: ...`` diagnostic.
    """

    timestamp: datetime
    level: str
    message: str

    def render(self) -> str:
        """Return the line without its trailing newline.

        Examples
        --------
        >>> LogRecord(datetime(2025, 1, 2, 3, 4, 5), "INFO", "ready").render()
        '[2025-01-02 03:04:05] [INFO] ready'
        """

        return f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] [{self.level}] {self.message}"


__all__ = ["LogRecord", "TIMESTAMP_FORMAT"]
