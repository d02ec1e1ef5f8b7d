"""String formatter with fail-soft diagnostics and a timestamped log emitter.

Purpose
-------
Turn a ``{}`` template plus positional arguments into text without ever
raising, and write ``[timestamp] [LEVEL] message`` lines to standard output.

Contents
--------
* :data:`FORMAT_ERROR_PREFIX` - prefix of diagnostic strings.
* :class:`StringFormatter` - field-free formatter with injectable console and
  clock collaborators.
* :func:`format_message`, :func:`log`, :func:`get_version`,
  :func:`get_library_type` - module-level shortcuts.

System Role
-----------
Composition point joining the domain record, the clock port and the Rich
console adapter. Formatting failures are data at this boundary: they are
returned as ``"Format error: ..."`` strings and reported on the module logger.
"""

from __future__ import annotations

import logging
import string
from typing import Any, Mapping, Sequence

from . import __init__conf__
from .adapters.console.rich_console import RichConsoleAdapter
from .application.ports.console import ConsolePort
from .application.ports.time import ClockPort, SystemClock
from .domain.levels import LogLevel, level_tag
from .domain.records import LogRecord

FORMAT_ERROR_PREFIX = "Format error: "

logger = logging.getLogger(__name__)


class _PositionalFormatter(string.Formatter):
    """``str.format`` without attribute or index lookups inside fields.

    Examples
    --------
    >>> _PositionalFormatter().format("{1}-{0}", "a", "b")
    'b-a'
    >>> _PositionalFormatter().format("{0.real}", 1)
    Traceback (most recent call last):
    ...
    ValueError: Invalid format field '0.real': attribute and index lookups are not supported
    """

    def get_field(self, field_name: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> tuple[Any, Any]:
        if "." in field_name or "[" in field_name:
            raise ValueError(f"Invalid format field {field_name!r}: attribute and index lookups are not supported")
        return super().get_field(field_name, args, kwargs)

    def get_value(self, key: int | str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> Any:
        if isinstance(key, int) and key >= len(args):
            raise IndexError(f"Replacement index {key} out of range for positional args tuple")
        return super().get_value(key, args, kwargs)


_TEMPLATE_ENGINE = _PositionalFormatter()


def _render_template(template: str, args: Sequence[Any]) -> str:
    text = template if isinstance(template, str) else str(template)
    try:
        return _TEMPLATE_ENGINE.format(text, *args)
    except Exception as exc:
        logger.debug("Format error for template %r: %s", text, exc)
        return f"{FORMAT_ERROR_PREFIX}{exc}"


class StringFormatter:
    """Format templates and emit timestamped log lines.

    The instance carries no state that influences formatting; ``console`` and
    ``clock`` only choose where lines go and which time is stamped on them.
    The default console leaves its output file unset, so lines always reach
    the :data:`sys.stdout` current at the time of :meth:`log`.
    """

    def __init__(self, *, console: ConsolePort | None = None, clock: ClockPort | None = None) -> None:
        self._console = console if console is not None else RichConsoleAdapter()
        self._clock = clock if clock is not None else SystemClock()

    def format(self, template: str, *args: Any) -> str:
        """Substitute ``{}`` placeholders in ``template`` from left to right.

        Python's format mini-language applies, so ``{0}`` and ``{:>5}`` work;
        attribute and index lookups such as ``{0.real}`` are rejected.
        Unused trailing arguments are ignored. A malformed template or a
        missing argument yields ``"Format error: <details>"`` instead of an
        exception.

        Examples
        --------
        >>> StringFormatter().format("Hello, {}! The answer is {}.", "World", 42)
        'Hello, World! The answer is 42.'
        >>> StringFormatter().format("{} and {}", "one")
        'Format error: Replacement index 1 out of range for positional args tuple'
        """
        return _render_template(template, args)

    def log(self, level: str | LogLevel, template: str, *args: Any) -> None:
        """Write one ``[YYYY-MM-DD HH:MM:SS] [LEVEL] message`` line to stdout.

        ``level`` is either free text (written as given, minus surrounding
        whitespace) or a :class:`LogLevel`, written as its short tag.
        """
        record = LogRecord(
            timestamp=self._clock.now(),
            level=level_tag(level),
            message=self.format(template, *args),
        )
        self._console.emit(record.render(), level=record.level)

    @staticmethod
    def get_version() -> str:
        """Return the semantic version of the library.

        Examples
        --------
        >>> StringFormatter.get_version()
        '1.0.0'
        """
        return __init__conf__.version

    @staticmethod
    def get_library_type() -> str:
        """Return how the library is linked; a packaging constant."""
        return __init__conf__.library_type


def format_message(template: str, *args: Any) -> str:
    """Module-level shortcut for :meth:`StringFormatter.format`."""
    return _render_template(template, args)


def log(level: str | LogLevel, template: str, *args: Any) -> None:
    """Module-level shortcut for :meth:`StringFormatter.log`.

    A fresh formatter per call picks up the current colour settings.
    """
    StringFormatter().log(level, template, *args)


get_version = StringFormatter.get_version
get_library_type = StringFormatter.get_library_type


__all__ = [
    "FORMAT_ERROR_PREFIX",
    "StringFormatter",
    "format_message",
    "get_library_type",
    "get_version",
    "log",
]
