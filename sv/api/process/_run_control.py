"""Shared work generator for start/stop/restart commands."""

from collections.abc import Iterator, Sequence

from pydantic import BaseModel

from ..config.SvConfig import SvConfig
from ..errors import SvError
from ..StageResult import StageResult
from ..status.StatusReader import StatusReader
from .ProcessController import ProcessController
from .resolve_tokens import resolve_tokens


def _run_control(
    result_obj: StageResult,
    action: str,
    tokens: Sequence[str],
    output_class: type[BaseModel],
) -> Iterator[tuple[float, str]]:
    """Resolve ``tokens`` against a fresh listing and apply ``action`` to each target.

    Targets run one at a time; the outcome is a per-target tally, never all-or-nothing.
    """

    def fail(message: str, warnings: list[str] | None = None) -> None:
        result_obj.result = message
        result_obj.output = output_class(
            errors=[message],
            warnings=warnings or [],
            action=action,
            targets=[],
            forwarded=[],
            results=[],
            succeeded=0,
            failed=0,
        ).model_dump(mode="python")
        result_obj.success = False

    if not tokens:
        yield (1.0, "Complete")
        fail(f"No processes given to {action} (use an index, name, or range like 1-3)")
        return

    yield (0.1, "Loading configuration...")
    try:
        config = SvConfig.load()
        reader = StatusReader.from_config(config)
        yield (0.2, "Getting process list...")
        processes = reader.get_all_processes()
    except SvError as e:
        yield (1.0, "Complete")
        fail(f"Failed to get process list: {e}")
        return

    yield (0.3, "Resolving process arguments...")
    try:
        resolved = resolve_tokens(tokens, processes)
    except SvError as e:
        yield (1.0, "Complete")
        fail(f"Failed to resolve process arguments: {e}")
        return

    warnings = [f"No process named {item.name!r} in listing, passing it through" for item in resolved if item.forwarded]
    targets = [item.name for item in resolved]
    controller = ProcessController(command=config.ctl_command)

    results = []
    for position, name in enumerate(targets, start=1):
        yield (0.3 + 0.7 * (position - 1) / len(targets), f"{action} {name}...")
        results.extend(controller.control_many(action, [name]))

    succeeded = sum(1 for item in results if item.success)
    failed = len(results) - succeeded

    yield (1.0, "Complete")
    result_obj.result = f"{action.capitalize()} finished: {succeeded} succeeded, {failed} failed"
    result_obj.output = output_class(
        errors=[f"{item.name}: {item.error}" for item in results if not item.success],
        warnings=warnings,
        action=action,
        targets=targets,
        forwarded=[item.name for item in resolved if item.forwarded],
        results=[item.to_dict() for item in results],
        succeeded=succeeded,
        failed=failed,
    ).model_dump(mode="python")
    result_obj.success = failed == 0
