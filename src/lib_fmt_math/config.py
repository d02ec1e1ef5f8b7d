"""Environment toggles for console colour.

Purpose
-------
Let operators force or suppress colour on the log-line console without code
changes. The rendered text never changes; only terminal styling does.

Contents
--------
* :data:`FORCE_COLOR_ENV_VAR`, :data:`NO_COLOR_ENV_VAR` - variable names.
* :class:`ConsoleSettings` - resolved toggles.
* :func:`env_bool` / :func:`console_settings` - parsing helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

FORCE_COLOR_ENV_VAR = "LIB_FMT_MATH_FORCE_COLOR"
NO_COLOR_ENV_VAR = "LIB_FMT_MATH_NO_COLOR"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class ConsoleSettings:
    """Colour preferences handed to :class:`RichConsoleAdapter`."""

    force_color: bool = False
    no_color: bool = False


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LIB_FMT_MATH_EXAMPLE_BOOL', None)
    >>> env_bool('LIB_FMT_MATH_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LIB_FMT_MATH_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('LIB_FMT_MATH_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LIB_FMT_MATH_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def console_settings() -> ConsoleSettings:
    """Read the colour toggles from the current environment."""

    return ConsoleSettings(
        force_color=env_bool(FORCE_COLOR_ENV_VAR, False),
        no_color=env_bool(NO_COLOR_ENV_VAR, False),
    )


__all__ = [
    "FORCE_COLOR_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "ConsoleSettings",
    "console_settings",
    "env_bool",
]
