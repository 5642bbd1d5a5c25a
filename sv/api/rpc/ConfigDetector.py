"""Detect and enable the supervisord XML-RPC interface in its config file."""

import os
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ...utils.get_logger import get_logger
from ..errors import ConfigError

logger = get_logger("rpc.config")

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("/etc/supervisor/supervisord.conf"),
    Path("/etc/supervisord.conf"),
)

INET_HTTP_SERVER_SECTION = "[inet_http_server]\nport=127.0.0.1:9001\n"
RPC_INTERFACE_SECTION = (
    "[rpcinterface:supervisor]\n"
    "supervisor.rpcinterface_factory = supervisor.rpcinterface:make_main_rpcinterface\n"
)

# Tried in order until one succeeds
RESTART_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("systemctl", "restart", "supervisor"),
    ("service", "supervisor", "restart"),
)


@dataclass
class RpcConfigStatus:
    path: Path | None
    inet_http_server: bool = False
    rpc_interface: bool = False
    changed: list[str] = field(default_factory=list)
    restarted: bool = False

    @property
    def enabled(self) -> bool:
        return self.inet_http_server and self.rpc_interface


def _section_has(text: str, section: str, predicate: Callable[[str, str], bool]) -> bool:
    """True if any line inside ``[section]`` satisfies ``predicate(raw, stripped)``."""
    in_section = False
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("[") and stripped.endswith("]"):
            in_section = stripped.strip("[]") == section
            continue
        if in_section and predicate(line, stripped):
            return True
    return False


def _uncommented(line: str) -> bool:
    return not line.startswith((";", "#"))


class ConfigDetector:
    """Inspects the first existing supervisord config among ``paths``."""

    def __init__(
        self,
        paths: Sequence[Path] = DEFAULT_CONFIG_PATHS,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.paths = tuple(paths)
        self._runner = runner

    def find_config(self) -> Path | None:
        for path in self.paths:
            if path.is_file():
                return path
        return None

    @staticmethod
    def has_inet_http_server(path: Path) -> bool:
        return _section_has(
            path.read_text(),
            "inet_http_server",
            lambda raw, stripped: stripped.startswith("port=") and _uncommented(raw),
        )

    @staticmethod
    def has_rpc_interface(path: Path) -> bool:
        return _section_has(
            path.read_text(),
            "rpcinterface:supervisor",
            lambda raw, stripped: "rpcinterface_factory" in stripped and _uncommented(raw),
        )

    @staticmethod
    def _check_writable(path: Path) -> None:
        if not os.access(path, os.W_OK):
            raise ConfigError(f"Config file is not writable: {path}")

    def add_inet_http_server(self, path: Path) -> bool:
        """Insert ``[inet_http_server]`` after ``[unix_http_server]`` (else at the top).

        Returns False when the section header already exists.
        """
        content = path.read_text()
        if "[inet_http_server]" in content:
            return False
        self._check_writable(path)

        block = f"\n{INET_HTTP_SERVER_SECTION}\n"
        unix_pos = content.find("[unix_http_server]")
        next_pos = content.find("[", unix_pos + 1) if unix_pos != -1 else -1
        if next_pos != -1:
            content = content[:next_pos] + block + content[next_pos:]
        else:
            content = block + content
        path.write_text(content)
        return True

    def add_rpc_interface(self, path: Path) -> bool:
        """Insert ``[rpcinterface:supervisor]`` before ``[supervisorctl]`` (else at the end).

        Returns False when the section header already exists.
        """
        content = path.read_text()
        if "[rpcinterface:supervisor]" in content:
            return False
        self._check_writable(path)

        block = f"\n{RPC_INTERFACE_SECTION}\n"
        ctl_pos = content.find("[supervisorctl]")
        if ctl_pos != -1:
            content = content[:ctl_pos] + block + content[ctl_pos:]
        else:
            content = content + block
        path.write_text(content)
        return True

    def detect(self) -> RpcConfigStatus:
        path = self.find_config()
        if path is None:
            return RpcConfigStatus(path=None)
        return RpcConfigStatus(
            path=path,
            inet_http_server=self.has_inet_http_server(path),
            rpc_interface=self.has_rpc_interface(path),
        )

    def restart_supervisor(self) -> None:
        """Restart supervisord so config changes take effect.

        Raises:
            ConfigError: If no restart command succeeded
        """
        failures: list[str] = []
        for argv in RESTART_COMMANDS:
            try:
                proc = self._runner(list(argv), capture_output=True, text=True, check=False)
            except OSError as e:
                failures.append(f"{' '.join(argv)}: {e}")
                continue
            if proc.returncode == 0:
                logger.info("Restarted supervisor with %s", " ".join(argv))
                return
            failures.append(f"{' '.join(argv)}: exit {proc.returncode}")
        raise ConfigError(f"Could not restart supervisor ({'; '.join(failures)})")

    def enable(self, restart: bool = True) -> RpcConfigStatus:
        """Add whichever RPC sections are missing, restarting supervisord if anything changed.

        Raises:
            ConfigError: No config file found, file not writable, or restart failed
        """
        status = self.detect()
        if status.path is None:
            raise ConfigError(f"No supervisor config file found (looked in: {', '.join(str(p) for p in self.paths)})")

        if not status.inet_http_server and self.add_inet_http_server(status.path):
            status.changed.append("inet_http_server")
        if not status.rpc_interface and self.add_rpc_interface(status.path):
            status.changed.append("rpcinterface:supervisor")

        status.inet_http_server = self.has_inet_http_server(status.path)
        status.rpc_interface = self.has_rpc_interface(status.path)

        if status.changed:
            logger.info("Updated %s: added %s", status.path, ", ".join(status.changed))
            if restart:
                self.restart_supervisor()
                status.restarted = True
        return status
