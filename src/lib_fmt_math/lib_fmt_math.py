"""Façade helpers shared by the package surface and the CLI.

Purpose
-------
Keep the metadata banner and the guided demo in one place so
``import lib_fmt_math`` and ``python -m lib_fmt_math`` exercise the same code.

Contents
--------
* :func:`summary_info` - metadata banner as a string.
* :func:`run_demo` - walk through formatting, logging and math helpers.
"""

from __future__ import annotations

from typing import Callable

import click

from . import __init__conf__
from .domain.math_utils import MathUtils
from .formatter import StringFormatter

DEMO_PRIME_CANDIDATES = (2, 17, 25, 29, 100, 101)
DEMO_FACTORIAL_INPUT = 10
DEMO_FIBONACCI_COUNT = 15


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def run_demo(
    formatter: StringFormatter | None = None,
    *,
    echo: Callable[[str], None] = click.echo,
) -> None:
    """Print a guided tour of every public operation.

    ``echo`` receives section headers and plain results; log lines go through
    ``formatter`` and therefore its console.
    """
    fmt = formatter if formatter is not None else StringFormatter()

    echo("=== lib_fmt_math Demo Application ===")
    echo("")
    echo(f"Library Version: {fmt.get_version()}")
    echo(f"Library Type: {fmt.get_library_type()}")

    echo("")
    echo("=== String Formatter Demo ===")
    formatted = fmt.format("Hello, {}! The answer is {}.", "World", 42)
    echo(f"Formatted string: {formatted}")

    echo("")
    echo("=== Logging Demo ===")
    fmt.log("INFO", "Application started successfully")
    fmt.log("WARN", "This is a warning message with value: {}", 123)
    fmt.log("ERROR", "Error processing item {} with status {}", "example.txt", "failed")

    echo("")
    echo("=== Math Utils Demo ===")
    factorial_result = MathUtils.factorial(DEMO_FACTORIAL_INPUT)
    echo(f"Factorial of {DEMO_FACTORIAL_INPUT} = {factorial_result}")
    echo("")
    echo("Prime number tests:")
    for number in DEMO_PRIME_CANDIDATES:
        echo(describe_primality(number))
    sequence = MathUtils.fibonacci(DEMO_FIBONACCI_COUNT)
    echo("")
    echo(f"First {DEMO_FIBONACCI_COUNT} Fibonacci numbers:")
    echo(", ".join(str(term) for term in sequence))

    echo("")
    echo("=== Combined Demo ===")
    fmt.log("INFO", "Calculated factorial({}) = {}", DEMO_FACTORIAL_INPUT, factorial_result)
    fmt.log("INFO", "Generated {} Fibonacci numbers", DEMO_FIBONACCI_COUNT)

    echo("")
    echo("=== Error Handling Demo ===")
    echo("Result: " + fmt.format("Test message: {}", "success"))
    echo("Result: " + fmt.format("Unbalanced {", "oops"))

    echo("")
    echo("=== Demo Complete ===")


def describe_primality(number: int) -> str:
    """Return ``"<n> is prime"`` or ``"<n> is not prime"``.

    Examples
    --------
    >>> describe_primality(25)
    '25 is not prime'
    """
    verdict = "prime" if MathUtils.is_prime(number) else "not prime"
    return f"{number} is {verdict}"


__all__ = ["describe_primality", "run_demo", "summary_info"]
