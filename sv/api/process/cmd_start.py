"""Start command - starts supervisord processes by index, name, or range."""

from collections.abc import Iterator, Sequence

from ..StageResult import StageResult
from . import ProcessStartOutput
from ._run_control import _run_control


def cmd_start(tokens: Sequence[str]) -> StageResult:
    """Start every process selected by ``tokens``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_control(result_obj, "start", list(tokens), ProcessStartOutput)

    return StageResult(
        announce="Running 'start'...",
        progress_callback=do_work,
    )
