"""Domain value objects and pure functions."""

from __future__ import annotations

from .levels import LogLevel, level_tag
from .math_utils import MathUtils, factorial, fibonacci, is_prime
from .records import TIMESTAMP_FORMAT, LogRecord

__all__ = [
    "LogLevel",
    "LogRecord",
    "MathUtils",
    "TIMESTAMP_FORMAT",
    "factorial",
    "fibonacci",
    "is_prime",
    "level_tag",
]
