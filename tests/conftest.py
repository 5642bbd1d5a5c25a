"""Shared pytest configuration and fixtures for all tests."""

import subprocess
from collections.abc import Callable
from typing import Any

import pytest
import requests

from sv.api.process.ProcessInfo import ProcessInfo
from sv.api.process.ProcessState import state_code, state_description

SV_ENV_VARS = (
    "SUPERVISOR_HOST",
    "SUPERVISOR_USER",
    "SUPERVISOR_PASSWORD",
    "SV_SUPERVISORCTL",
    "SV_RPC_TIMEOUT",
    "SV_LOG_LEVEL",
    "SV_LOG_FILE",
)


MARKERS = {
    "unit": "fast tests without external processes or network",
    "rpc": "XML-RPC codec, client and config detection",
    "status": "process listing and status parsing",
    "process": "token resolution and process control",
    "config": "environment configuration",
    "cli": "typer command line",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_process(index: int, name: str, state_name: str = "RUNNING", pid: int = 0, uptime: str = "") -> ProcessInfo:
    """ProcessInfo with state and description derived from ``state_name``."""
    state = state_code(state_name)
    return ProcessInfo(
        index=index,
        name=name,
        group=name.split(":", 1)[0] if ":" in name else "",
        state=state,
        state_name=state_name,
        pid=pid,
        uptime=uptime,
        description=state_description(state),
    )


class FakeRunner:
    """Stands in for ``subprocess.run`` and records every argv.

    ``responses`` maps an argv tuple to ``(returncode, output)``, or to an
    exception instance to raise. ``default`` is used for anything unmapped.
    """

    def __init__(
        self,
        responses: dict[tuple[str, ...], Any] | None = None,
        default: tuple[int, str] = (0, ""),
        handler: Callable[[list[str]], tuple[int, str]] | None = None,
    ):
        self.responses = responses or {}
        self.default = default
        self.handler = handler
        self.calls: list[list[str]] = []

    def __call__(self, argv, **kwargs) -> subprocess.CompletedProcess:
        self.calls.append(list(argv))
        if self.handler is not None:
            returncode, output = self.handler(list(argv))
        else:
            response = self.responses.get(tuple(argv), self.default)
            if isinstance(response, BaseException):
                raise response
            returncode, output = response
        return subprocess.CompletedProcess(argv, returncode, stdout=output, stderr=None)


class FakeResponse:
    def __init__(self, status_code: int = 200, content: bytes = b""):
        self.status_code = status_code
        self.content = content

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class FakeSession:
    """Minimal ``requests.Session`` replacement capturing POST arguments."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response or FakeResponse()
        self.error = error
        self.posts: list[dict[str, Any]] = []

    def post(self, url, **kwargs):
        self.posts.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def xmlrpc_response(value_xml: str) -> bytes:
    """Wrap a ``<value>`` fragment into a methodResponse body."""
    return (
        "<?xml version='1.0'?><methodResponse><params><param>"
        f"{value_xml}"
        "</param></params></methodResponse>"
    ).encode()


def process_struct(name: str, group: str, state: int, statename: str, pid: int, description: str) -> str:
    return (
        "<value><struct>"
        f"<member><name>name</name><value><string>{name}</string></value></member>"
        f"<member><name>group</name><value><string>{group}</string></value></member>"
        f"<member><name>state</name><value><int>{state}</int></value></member>"
        f"<member><name>statename</name><value><string>{statename}</string></value></member>"
        f"<member><name>pid</name><value><int>{pid}</int></value></member>"
        f"<member><name>description</name><value><string>{description}</string></value></member>"
        "</struct></value>"
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_sv_env(monkeypatch):
    """Start every test from default configuration."""
    for var in SV_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_processes() -> list[ProcessInfo]:
    return [
        make_process(1, "agent:agent_00", "RUNNING", 988995, "1 hours 59 minutes 48 seconds"),
        make_process(2, "agent:agent_01", "RUNNING", 988996, "1 hours 59 minutes 48 seconds"),
        make_process(3, "nginx", "STOPPED", 0, "Not started"),
        make_process(4, "web:api", "FATAL", 0, "Exited too quickly"),
    ]


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("Connection refused")
