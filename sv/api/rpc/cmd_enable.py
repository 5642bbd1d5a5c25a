"""RPC enable command - adds the XML-RPC sections to the supervisord config."""

from collections.abc import Iterator

from ..errors import ConfigError
from ..StageResult import StageResult
from . import RpcEnableOutput
from .ConfigDetector import ConfigDetector


def cmd_enable(restart: bool = True) -> StageResult:
    """Enable XML-RPC in the supervisord config.

    Args:
        restart: Restart supervisord when the config was changed
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Updating supervisor config...")
        detector = ConfigDetector()
        try:
            status = detector.enable(restart=restart)
        except (ConfigError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error enabling XML-RPC: {e}"
            result_obj.output = RpcEnableOutput(
                errors=[str(e)],
                warnings=[],
                config_path="",
                changed=[],
                restarted=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        if status.changed and not status.restarted:
            warnings.append("Config changed; restart supervisor to apply it")

        yield (1.0, "Complete")
        if status.changed:
            result_obj.result = f"Added {', '.join(status.changed)} to {status.path}"
        else:
            result_obj.result = f"XML-RPC already enabled in {status.path}"
        result_obj.output = RpcEnableOutput(
            errors=[],
            warnings=warnings,
            config_path=str(status.path),
            changed=status.changed,
            restarted=status.restarted,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Enabling supervisor XML-RPC...",
        progress_callback=do_work,
    )
