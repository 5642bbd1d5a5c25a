"""Start, stop and restart supervisord processes through supervisorctl."""

import subprocess
import time
from collections.abc import Callable, Iterable

from ...utils.get_logger import get_logger
from ..errors import ControlError, SvError, UnsupportedActionError
from .ControlResult import ControlResult
from .validate_process_name import validate_process_name

logger = get_logger("control")

ACTIONS = ("start", "stop", "restart")


class ProcessController:
    """Issues one control action per call, strictly sequentially.

    The command is always run with an argument vector, never through a shell.
    """

    def __init__(
        self,
        command: str = "supervisorctl",
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        sleep: Callable[[float], None] = time.sleep,
        restart_delay: float = 1.0,
    ):
        self.command = command
        self._runner = runner
        self._sleep = sleep
        self.restart_delay = restart_delay

    def control_process(self, action: str, name: str) -> None:
        """Run ``action`` against the canonical process ``name``.

        ``restart`` is ``stop``, a fixed pause, then ``start``; a failed stop
        aborts the restart.

        Raises:
            InvalidProcessNameError: Name rejected before any command is built
            UnsupportedActionError: Action is not start, stop or restart
            ControlError: Command failed or reported ERROR
        """
        validate_process_name(name)
        if action not in ACTIONS:
            raise UnsupportedActionError(f"Unsupported action: {action}")

        if action == "restart":
            try:
                self._run("stop", name)
            except ControlError as e:
                raise ControlError(f"restart {name} failed while stopping: {e}") from e
            self._sleep(self.restart_delay)
            self._run("start", name)
            return

        self._run(action, name)

    def control_many(self, action: str, names: Iterable[str]) -> list[ControlResult]:
        """Apply ``action`` to each name in turn, collecting one result per name.

        A failure never stops the remaining names from being processed.
        """
        results: list[ControlResult] = []
        for name in names:
            try:
                self.control_process(action, name)
            except SvError as e:
                logger.warning("%s %s failed: %s", action, name, e)
                results.append(ControlResult(name=name, success=False, error=str(e)))
            else:
                results.append(ControlResult(name=name, success=True))
        return results

    def _run(self, action: str, name: str) -> None:
        argv = [self.command, action, name]
        logger.info("Running %s", " ".join(argv))
        try:
            proc = self._runner(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ControlError(f"{action} {name} failed: {e}") from e

        output = proc.stdout or ""
        if proc.returncode != 0:
            raise ControlError(f"{action} {name} failed (exit {proc.returncode}): {output.strip()}")
        if "ERROR" in output:
            raise ControlError(f"{action} {name} failed: {output.strip()}")
        logger.info("%s %s succeeded", action, name)
