"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("table", "json", "yaml")


def _extract_display_format() -> str:
    """Display format stored by the root callback, ``table`` if none was set."""
    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in DISPLAY_FORMATS:
            return obj["display_format"]
        current = current.parent
    return "table"


def _handle_stage_result(
    func: F,
    result_printer: Callable[[CLIDisplay, dict[str, Any]], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout: table via ``result_printer``, or JSON/YAML)

    The wrapper exits with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        printer = functools.partial(result_printer, display) if result_printer else None
        _run_single_execution(func, args, kwargs, display, _extract_display_format(), printer)

    return wrapper  # type: ignore[return-value]
