"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import TypeVar

from rich.markup import escape

from sv.api.validate_output import validate_output

from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once and display result.

    Commands must handle all expected exceptions internally and report
    errors via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress - generator of (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        display.info(f"[dim]{display.timestamp()}[/dim] Progress: {escape(message)} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    result.output = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)
    for warning in result.output.get("warnings", []):
        display.warning(warning)

    # Stage 4: Output - table printer, JSON or YAML based on --display flag
    if display_format == "table" and result_printer is not None:
        result_printer(result.output)
    else:
        display.json_output(result.output, format="json" if display_format == "json" else "yaml")

    sys.exit(0 if result.success else 1)
