"""Stop command - stops supervisord processes by index, name, or range."""

from collections.abc import Iterator, Sequence

from ..StageResult import StageResult
from . import ProcessStopOutput
from ._run_control import _run_control


def cmd_stop(tokens: Sequence[str]) -> StageResult:
    """Stop every process selected by ``tokens``.

    Args:
        tokens: Indices (``2``), ranges (``1-3``), or names (``web``, ``grp:web``)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_control(result_obj, "stop", list(tokens), ProcessStopOutput)

    return StageResult(
        announce="Running 'stop'...",
        progress_callback=do_work,
    )
