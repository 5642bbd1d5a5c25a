"""Dual-channel process status: XML-RPC first, supervisorctl text as fallback."""

import subprocess
from collections.abc import Callable
from typing import Any

from ...utils.get_logger import get_logger
from ..config.SvConfig import SvConfig
from ..errors import RpcError, StatusUnavailableError
from ..process.ProcessInfo import ProcessInfo
from ..rpc.RpcClient import RpcClient
from .parse_status_output import parse_status_output
from .process_from_rpc import process_from_rpc
from .StatusChannel import StatusChannel

logger = get_logger("status")

# supervisorctl exits non-zero when any process is not running
_STATUS_WORDS = ("RUNNING", "STOPPED")


class StatusReader:
    """Fetches the full process listing.

    ``channel`` records which source answered the last query. Every query is
    independent; nothing is cached between the two channels or between calls.
    """

    def __init__(
        self,
        client: RpcClient,
        ctl_command: str = "supervisorctl",
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.client = client
        self.ctl_command = ctl_command
        self._runner = runner
        self.channel = StatusChannel.NONE
        self.rpc_error = ""

    @classmethod
    def from_config(cls, config: SvConfig) -> "StatusReader":
        client = RpcClient(
            config.host,
            username=config.username,
            password=config.password,
            timeout=config.timeout_secs,
        )
        return cls(client, ctl_command=config.ctl_command)

    def get_all_processes(self) -> list[ProcessInfo]:
        """Return every managed process.

        Any XML-RPC failure, including a result that is not a list of structs,
        switches to the supervisorctl channel, which has no further fallback.

        Raises:
            StatusUnavailableError: supervisorctl could not produce a listing
        """
        self.channel = StatusChannel.NONE
        self.rpc_error = ""
        try:
            result = self.client.get_all_process_info()
        except RpcError as e:
            self.rpc_error = str(e)
            logger.warning("XML-RPC call failed: %s, falling back to %s", e, self.ctl_command)
            return self._via_command()

        if not _is_process_list(result):
            self.rpc_error = f"Unexpected XML-RPC result type: {type(result).__name__}"
            logger.warning("%s, falling back to %s", self.rpc_error, self.ctl_command)
            return self._via_command()

        self.channel = StatusChannel.RPC
        logger.debug("Got %d processes via XML-RPC", len(result))
        return [process_from_rpc(info, index) for index, info in enumerate(result, start=1)]

    def _via_command(self) -> list[ProcessInfo]:
        self.channel = StatusChannel.FALLBACK
        argv = [self.ctl_command, "status"]
        try:
            proc = self._runner(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            raise StatusUnavailableError(f"Cannot run {self.ctl_command}: {e}") from e

        output = proc.stdout or ""
        if proc.returncode != 0:
            if not any(word in output for word in _STATUS_WORDS):
                raise StatusUnavailableError(
                    f"{self.ctl_command} status failed (exit {proc.returncode}): {output.strip()}"
                )
            logger.info("%s status exited %d, parsing its output anyway", self.ctl_command, proc.returncode)

        processes = parse_status_output(output)
        logger.debug("Got %d processes via %s", len(processes), self.ctl_command)
        return processes


def _is_process_list(result: Any) -> bool:
    return isinstance(result, list) and all(isinstance(item, dict) for item in result)
