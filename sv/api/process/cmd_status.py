"""Status command - lists all supervisord processes."""

from collections.abc import Iterator

from ..config.SvConfig import SvConfig
from ..errors import SvError
from ..StageResult import StageResult
from ..status.StatusChannel import StatusChannel
from ..status.StatusReader import StatusReader
from . import ProcessStatusOutput


def cmd_status() -> StageResult:
    """List processes, via XML-RPC when reachable and supervisorctl otherwise."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SvConfig.load()
            reader = StatusReader.from_config(config)
        except SvError as e:
            yield (1.0, "Complete")
            _fail(result_obj, str(e))
            return

        yield (0.3, "Querying supervisord...")
        try:
            processes = reader.get_all_processes()
        except SvError as e:
            yield (1.0, "Complete")
            _fail(result_obj, f"Failed to get process status: {e}")
            return

        warnings: list[str] = []
        if reader.channel == StatusChannel.FALLBACK:
            warnings.append(f"XML-RPC unavailable ({reader.rpc_error}), used {config.ctl_command} output")

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(processes)} processes"
        result_obj.output = ProcessStatusOutput(
            errors=[],
            warnings=warnings,
            channel=reader.channel.value,
            count=len(processes),
            processes=[proc.to_dict() for proc in processes],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Getting supervisor process status...",
        progress_callback=do_work,
    )


def _fail(result_obj: StageResult, message: str) -> None:
    result_obj.result = message
    result_obj.output = ProcessStatusOutput(
        errors=[message],
        warnings=[],
        channel=StatusChannel.NONE.value,
        count=0,
        processes=[],
    ).model_dump(mode="python")
    result_obj.success = False
