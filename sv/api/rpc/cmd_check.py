"""RPC check command - reports whether supervisord exposes XML-RPC."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import RpcCheckOutput
from .ConfigDetector import ConfigDetector


def cmd_check() -> StageResult:
    """Inspect the supervisord config for the HTTP server and RPC interface sections."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Looking for supervisor config...")
        detector = ConfigDetector()
        try:
            status = detector.detect()
        except OSError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error reading supervisor config: {e}"
            result_obj.output = RpcCheckOutput(
                errors=[str(e)],
                warnings=[],
                config_path="",
                inet_http_server=False,
                rpc_interface=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if status.path is None:
            result_obj.result = "No supervisor config file found"
            errors = [result_obj.result]
        elif status.enabled:
            result_obj.result = f"XML-RPC is enabled in {status.path}"
            errors = []
        else:
            result_obj.result = f"XML-RPC is not fully enabled in {status.path} (run 'sv rpc enable')"
            errors = []
        result_obj.output = RpcCheckOutput(
            errors=errors,
            warnings=[],
            config_path=str(status.path) if status.path else "",
            inet_http_server=status.inet_http_server,
            rpc_interface=status.rpc_interface,
        ).model_dump(mode="python")
        result_obj.success = status.enabled

    return StageResult(
        announce="Checking supervisor XML-RPC configuration...",
        progress_callback=do_work,
    )
