"""Unit test fixtures.

Most helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for patching the status and control seams.
"""

from unittest.mock import MagicMock

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import FakeRunner, FakeResponse, FakeSession, make_process, run_cmd

__all__ = [
    "FakeResponse",
    "FakeRunner",
    "FakeSession",
    "make_process",
    "patch_status_reader",
    "run_cmd",
]


@pytest.fixture
def patch_status_reader(monkeypatch):
    """Replace ``StatusReader.from_config`` with a factory returning a mock reader.

    Call the fixture with the processes (or an exception) and the channel to
    report; it returns the mock so tests can inspect it.
    """
    from sv.api.status.StatusChannel import StatusChannel
    from sv.api.status.StatusReader import StatusReader

    def _patch(processes=None, channel=StatusChannel.RPC, rpc_error="", error=None):
        reader = MagicMock()
        reader.channel = channel
        reader.rpc_error = rpc_error
        if error is not None:
            reader.get_all_processes.side_effect = error
        else:
            reader.get_all_processes.return_value = list(processes or [])
        monkeypatch.setattr(StatusReader, "from_config", classmethod(lambda cls, config: reader))
        return reader

    return _patch
