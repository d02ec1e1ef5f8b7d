"""Adapters implementing the application ports."""

from __future__ import annotations

from .console import RichConsoleAdapter

__all__ = ["RichConsoleAdapter"]
