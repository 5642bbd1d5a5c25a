"""Restart command - restarts supervisord processes by index, name, or range."""

from collections.abc import Iterator, Sequence

from ..StageResult import StageResult
from . import ProcessRestartOutput
from ._run_control import _run_control


def cmd_restart(tokens: Sequence[str]) -> StageResult:
    """Restart every process selected by ``tokens``.

    Each target is stopped, given a one second pause, then started. A target
    whose stop fails is not started.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_control(result_obj, "restart", list(tokens), ProcessRestartOutput)

    return StageResult(
        announce="Running 'restart'...",
        progress_callback=do_work,
    )
