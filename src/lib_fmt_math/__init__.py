"""Public package surface: the string formatter and the math helpers.

``StringFormatter`` formats ``{}`` templates without raising and writes
timestamped log lines; ``MathUtils`` (and the matching free functions) covers
factorial, primality and Fibonacci sequences.
"""

from __future__ import annotations

from .domain.levels import LogLevel
from .domain.math_utils import MathUtils, factorial, fibonacci, is_prime
from .formatter import (
    FORMAT_ERROR_PREFIX,
    StringFormatter,
    format_message,
    get_library_type,
    get_version,
    log,
)
from .lib_fmt_math import summary_info

__all__ = [
    "FORMAT_ERROR_PREFIX",
    "LogLevel",
    "MathUtils",
    "StringFormatter",
    "factorial",
    "fibonacci",
    "format_message",
    "get_library_type",
    "get_version",
    "is_prime",
    "log",
    "summary_info",
]
