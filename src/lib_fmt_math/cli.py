"""Click command group exposing the formatter and math helpers.

Purpose
-------
Offer a thin shell around the public operations so the library can be tried
from a terminal (``lib_fmt_math demo``) and smoke-tested after installation.

Contents
--------
* :func:`cli` - root group with ``--version`` and the ``info`` default.
* Subcommands ``info``, ``format``, ``log``, ``factorial``, ``is-prime``,
  ``fibonacci`` and ``demo``.
* :func:`main` - test-friendly runner returning the exit code.

System Role
-----------
Presentation layer only; every command delegates to
:mod:`lib_fmt_math.formatter` or :mod:`lib_fmt_math.domain.math_utils`.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

import click

from . import __init__conf__
from .domain.math_utils import MathUtils
from .formatter import StringFormatter
from .lib_fmt_math import describe_primality, run_demo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_INT_RE = re.compile(r"[-+]?[0-9]+")
_FLOAT_RE = re.compile(r"[-+]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|[-+]?[0-9]+[eE][-+]?[0-9]+")


def _coerce_arg(raw: str) -> Any:
    """Return ``raw`` as ``int`` or ``float`` when it is a plain ASCII number.

    Anything else, including ``"1_000"`` or padded digits, stays text.

    Examples
    --------
    >>> _coerce_arg("42"), _coerce_arg("-7"), _coerce_arg("4.2"), _coerce_arg("1e3")
    (42, -7, 4.2, 1000.0)
    >>> _coerce_arg("1_000"), _coerce_arg(" 42 "), _coerce_arg("nan")
    ('1_000', ' 42 ', 'nan')
    """
    if _INT_RE.fullmatch(raw):
        return int(raw)
    if _FLOAT_RE.fullmatch(raw):
        return float(raw)
    return raw


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, *, version: bool) -> None:
    """Format strings, emit log lines and run the math helpers."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("format", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("template")
@click.argument("args", nargs=-1)
def cli_format(template: str, args: tuple[str, ...]) -> None:
    """Print TEMPLATE with each {} replaced by the next ARG."""

    click.echo(StringFormatter().format(template, *(_coerce_arg(arg) for arg in args)))


@cli.command("log", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("level")
@click.argument("template")
@click.argument("args", nargs=-1)
def cli_log(level: str, template: str, args: tuple[str, ...]) -> None:
    """Write one timestamped LEVEL line built from TEMPLATE and ARGS."""

    StringFormatter().log(level, template, *(_coerce_arg(arg) for arg in args))


@cli.command("factorial", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("n", type=int)
def cli_factorial(n: int) -> None:
    """Print N! (-1 for negative N)."""

    click.echo(f"Factorial of {n} = {MathUtils.factorial(n)}")


@cli.command("is-prime", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("numbers", nargs=-1, required=True, type=int)
def cli_is_prime(numbers: tuple[int, ...]) -> None:
    """Report whether each of NUMBERS is prime."""

    for number in numbers:
        click.echo(describe_primality(number))


@cli.command("fibonacci", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("count", type=int)
def cli_fibonacci(count: int) -> None:
    """Print the first COUNT Fibonacci numbers."""

    click.echo(", ".join(str(term) for term in MathUtils.fibonacci(count)))


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_demo() -> None:
    """Walk through every public operation."""

    run_demo()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click exit code on usage errors.

    Examples
    --------
    >>> main(["--version"])
    1.0.0
    0
    >>> main(["factorial", "5"])
    Factorial of 5 = 120
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main"]
