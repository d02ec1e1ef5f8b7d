"""Static package metadata surfaced to the CLI and the formatter.

Purpose
-------
Keep the distribution facts (name, version, console command, build type) in a
single module so ``StringFormatter.get_version`` and the ``info`` banner never
drift apart.

Contents
--------
* Module constants describing the distribution.
* :func:`print_info` - render the metadata banner through a writer callable.

System Role
-----------
Read-only configuration consumed by :mod:`lib_fmt_math.formatter` and
:mod:`lib_fmt_math.cli`; nothing here is computed at runtime.
"""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_fmt_math"
title = "String formatting, timestamped log lines and textbook math helpers"
version = "1.0.0"
author = "lib_fmt_math maintainers"
shell_command = "lib_fmt_math"

library_type = "Dynamic Library"
#: Packaging fact reported by ``get_library_type``; Python packages are always loaded dynamically.


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner using ``writer``.

    Each call to ``writer`` receives one complete line including its trailing
    newline; the default writes to :data:`sys.stdout`.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_fmt_math:\\n'
    """

    emit = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("library_type", library_type),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
