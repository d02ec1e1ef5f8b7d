"""Textbook integer helpers: factorial, primality and Fibonacci.

Purpose
-------
Provide small pure functions with fixed-width integer semantics so results
match a native signed 64-bit implementation.

Contents
--------
* :func:`factorial` - product ``1..n`` with a ``-1`` sentinel for negatives.
* :func:`is_prime` - 6k±1 trial division primality test.
* :func:`fibonacci` - first ``n`` Fibonacci terms as a list.
* :class:`MathUtils` - namespace exposing the three as static methods.

System Role
-----------
Domain layer with no collaborators; safe to call from any thread.
"""

from __future__ import annotations

import operator

_INT64_SPAN = 1 << 64
_INT64_MIN = -(1 << 63)


def _wrap_int64(value: int) -> int:
    """Reduce ``value`` to signed 64-bit two's complement.

    Examples
    --------
    >>> _wrap_int64(2**63)
    -9223372036854775808
    >>> _wrap_int64(42)
    42
    """
    return (value - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


def factorial(n: int) -> int:
    """Return ``n!`` or ``-1`` when ``n`` is negative.

    Products beyond the signed 64-bit range wrap around rather than growing,
    so ``factorial(21)`` is negative.

    Examples
    --------
    >>> factorial(5)
    120
    >>> factorial(-3)
    -1
    """
    n = operator.index(n)
    if n < 0:
        return -1
    result = 1
    for i in range(2, n + 1):
        result = _wrap_int64(result * i)
    return result


def is_prime(n: int) -> bool:
    """Return ``True`` when ``n`` is a prime number.

    Examples
    --------
    >>> [value for value in range(20) if is_prime(value)]
    [2, 3, 5, 7, 11, 13, 17, 19]
    """
    n = operator.index(n)
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers starting at ``0``.

    Examples
    --------
    >>> fibonacci(8)
    [0, 1, 1, 2, 3, 5, 8, 13]
    >>> fibonacci(0)
    []
    """
    n = operator.index(n)
    if n <= 0:
        return []
    sequence = [0]
    if n == 1:
        return sequence
    sequence.append(1)
    for i in range(2, n):
        sequence.append(_wrap_int64(sequence[i - 1] + sequence[i - 2]))
    return sequence


class MathUtils:
    """Namespace grouping the math helpers for class-style callers."""

    factorial = staticmethod(factorial)
    is_prime = staticmethod(is_prime)
    fibonacci = staticmethod(fibonacci)


__all__ = ["MathUtils", "factorial", "fibonacci", "is_prime"]
