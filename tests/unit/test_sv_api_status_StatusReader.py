"""Tests for sv/api/status/StatusReader.py and process_from_rpc.py."""

from unittest.mock import MagicMock

import pytest

from sv.api.config.SvConfig import SvConfig
from sv.api.errors import RpcDecodeError, RpcFaultError, RpcTransportError, StatusUnavailableError
from sv.api.rpc.RpcClient import RpcClient
from sv.api.status.process_from_rpc import process_from_rpc
from sv.api.status.StatusChannel import StatusChannel
from sv.api.status.StatusReader import StatusReader
from tests.conftest import FakeResponse, FakeRunner, FakeSession, process_struct, xmlrpc_response

pytestmark = pytest.mark.status

CTL_OUTPUT = "web RUNNING pid 10, uptime 0:00:30\nnginx STOPPED Not started\n"


def _rpc_client(response=None, error=None) -> RpcClient:
    return RpcClient("http://localhost:9001/RPC2", session=FakeSession(response=response, error=error))


def test_rpc_channel_used_when_available():
    body = xmlrpc_response(
        "<value><array><data>"
        + process_struct("agent_00", "agent", 20, "RUNNING", 99, "pid 99, uptime 1:00:00")
        + process_struct("web", "web", 0, "STOPPED", 0, "Not started")
        + "</data></array></value>"
    )
    runner = FakeRunner()
    reader = StatusReader(_rpc_client(FakeResponse(200, body)), runner=runner)

    processes = reader.get_all_processes()

    assert reader.channel == StatusChannel.RPC
    assert reader.rpc_error == ""
    assert runner.calls == []
    assert [p.name for p in processes] == ["agent:agent_00", "web"]
    assert [p.index for p in processes] == [1, 2]
    assert processes[0].uptime == "pid 99, uptime 1:00:00"
    assert processes[1].uptime == "Stopped"


@pytest.mark.parametrize(
    "error",
    [
        RpcTransportError("Request failed: refused"),
        RpcDecodeError("Empty response body"),
        RpcFaultError("SHUTDOWN_STATE"),
    ],
)
def test_fallback_on_any_rpc_error(error):
    client = MagicMock()
    client.get_all_process_info.side_effect = error
    runner = FakeRunner(default=(0, CTL_OUTPUT))
    reader = StatusReader(client, runner=runner)

    processes = reader.get_all_processes()

    assert reader.channel == StatusChannel.FALLBACK
    assert reader.rpc_error == str(error)
    assert runner.calls == [["supervisorctl", "status"]]
    assert [p.name for p in processes] == ["web", "nginx"]


def test_fallback_on_http_error_status():
    runner = FakeRunner(default=(0, CTL_OUTPUT))
    reader = StatusReader(_rpc_client(FakeResponse(401, b"Unauthorized")), runner=runner)

    reader.get_all_processes()

    assert reader.channel == StatusChannel.FALLBACK
    assert "401" in reader.rpc_error


@pytest.mark.timeout(30)
def test_fallback_on_deeply_nested_response():
    nested = "<value><array><data>" * 1500 + "</data></array></value>" * 1500
    runner = FakeRunner(default=(0, CTL_OUTPUT))
    reader = StatusReader(_rpc_client(FakeResponse(200, xmlrpc_response(nested))), runner=runner)

    processes = reader.get_all_processes()

    assert reader.channel == StatusChannel.FALLBACK
    assert "nested too deeply" in reader.rpc_error
    assert [p.name for p in processes] == ["web", "nginx"]


@pytest.mark.parametrize("result", ["text", 0, None, ["not-a-struct"]])
def test_fallback_on_unexpected_result(result):
    client = MagicMock()
    client.get_all_process_info.return_value = result
    runner = FakeRunner(default=(0, CTL_OUTPUT))
    reader = StatusReader(client, runner=runner)

    processes = reader.get_all_processes()

    assert reader.channel == StatusChannel.FALLBACK
    assert "Unexpected XML-RPC result type" in reader.rpc_error
    assert len(processes) == 2


def test_fallback_uses_configured_command():
    client = MagicMock()
    client.get_all_process_info.side_effect = RpcTransportError("down")
    runner = FakeRunner(default=(0, CTL_OUTPUT))
    reader = StatusReader(client, ctl_command="/opt/bin/supervisorctl", runner=runner)

    reader.get_all_processes()

    assert runner.calls == [["/opt/bin/supervisorctl", "status"]]


def test_nonzero_exit_with_status_words_is_parsed():
    client = MagicMock()
    client.get_all_process_info.side_effect = RpcTransportError("down")
    reader = StatusReader(client, runner=FakeRunner(default=(3, CTL_OUTPUT)))

    processes = reader.get_all_processes()

    assert len(processes) == 2


def test_nonzero_exit_without_status_words_raises():
    client = MagicMock()
    client.get_all_process_info.side_effect = RpcTransportError("down")
    runner = FakeRunner(default=(4, "unix:///var/run/supervisor.sock no such file"))
    reader = StatusReader(client, runner=runner)

    with pytest.raises(StatusUnavailableError, match="exit 4"):
        reader.get_all_processes()
    assert reader.channel == StatusChannel.FALLBACK


def test_missing_command_raises():
    client = MagicMock()
    client.get_all_process_info.side_effect = RpcTransportError("down")
    runner = FakeRunner(responses={("supervisorctl", "status"): FileNotFoundError("supervisorctl")})
    reader = StatusReader(client, runner=runner)

    with pytest.raises(StatusUnavailableError, match="Cannot run supervisorctl"):
        reader.get_all_processes()


def test_each_query_starts_from_rpc():
    client = MagicMock()
    client.get_all_process_info.side_effect = [RpcTransportError("down"), []]
    reader = StatusReader(client, runner=FakeRunner(default=(0, CTL_OUTPUT)))

    reader.get_all_processes()
    assert reader.channel == StatusChannel.FALLBACK

    assert reader.get_all_processes() == []
    assert reader.channel == StatusChannel.RPC
    assert reader.rpc_error == ""


def test_from_config():
    config = SvConfig(
        host="http://example:9001/RPC2",
        username="u",
        password="p",
        ctl_command="ctl",
        timeout_secs=3,
    )
    reader = StatusReader.from_config(config)
    assert reader.client.url == "http://example:9001/RPC2"
    assert reader.client.auth == ("u", "p")
    assert reader.client.timeout == 3
    assert reader.ctl_command == "ctl"
    assert reader.channel == StatusChannel.NONE


def test_process_from_rpc_missing_and_mistyped_members():
    proc = process_from_rpc({"name": "web", "state": "RUNNING", "pid": True}, 5)
    assert proc.index == 5
    assert proc.name == "web"
    assert proc.group == ""
    assert proc.state == 0
    assert proc.pid == 0
    assert proc.uptime == "Stopped"
    assert proc.description == "Stopped"


def test_process_from_rpc_group_prefix():
    proc = process_from_rpc(
        {"name": "agent_01", "group": "agent", "state": 10, "statename": "STARTING", "pid": 7, "description": "x"},
        1,
    )
    assert proc.name == "agent:agent_01"
    assert proc.group == "agent"
    assert proc.description == "Starting"
    assert proc.uptime == "x"
