"""Tests for sv/api/status/parse_status_output.py."""

import pytest

from sv.api.process.ProcessState import ProcessState
from sv.api.status.is_process_line import is_process_line
from sv.api.status.parse_status_output import parse_status_output

pytestmark = pytest.mark.status

SAMPLE = """\
agent:agent_00                   RUNNING   pid 988995, uptime 30 days, 16:17:38
agent:agent_01                   RUNNING   pid 988996, uptime 1:59:48
nginx                            STOPPED   Not started
web:api                          FATAL     Exited too quickly (process log may have details)
worker                           BACKOFF   Exited too quickly (process log may have details)
"""


def test_parse_sample_listing():
    processes = parse_status_output(SAMPLE)

    assert [p.index for p in processes] == [1, 2, 3, 4, 5]
    assert [p.name for p in processes] == ["agent:agent_00", "agent:agent_01", "nginx", "web:api", "worker"]

    first = processes[0]
    assert first.group == "agent"
    assert first.state == ProcessState.RUNNING
    assert first.state_name == "RUNNING"
    assert first.pid == 988995
    assert first.uptime == "30 days, 16 hours 17 minutes 38 seconds"
    assert first.description == "Running"

    assert processes[1].uptime == "1 hours 59 minutes 48 seconds"


def test_parse_stopped_keeps_trailing_text():
    nginx = parse_status_output(SAMPLE)[2]
    assert nginx.group == ""
    assert nginx.state == ProcessState.STOPPED
    assert nginx.pid == 0
    assert nginx.uptime == "Not started"
    assert nginx.description == "Stopped"


def test_parse_fatal_and_backoff():
    processes = parse_status_output(SAMPLE)
    assert processes[3].state == ProcessState.FATAL
    assert processes[3].description == "Fatal error"
    assert processes[3].uptime.startswith("Exited too quickly")
    assert processes[4].state == ProcessState.BACKOFF
    assert processes[4].description == "Backing off"


@pytest.mark.parametrize("output", ["", "   ", "\n\n", " \t \n"])
def test_parse_blank_output(output):
    assert parse_status_output(output) == []


def test_parse_skips_unrecognized_lines():
    output = "nginx RUNNING pid 1234, uptime 1h\ninvalid line\nredis RUNNING pid 5678, uptime 2h"
    processes = parse_status_output(output)

    assert [p.name for p in processes] == ["nginx", "redis"]
    assert [p.index for p in processes] == [1, 2]
    assert processes[0].pid == 1234
    assert processes[0].uptime == "1h"
    assert processes[1].pid == 5678


def test_parse_complex_listing():
    output = (
        "long_process_name_very_long     RUNNING   pid 1, uptime 30 days, 5:23:45\n"
        "short                           STOPPED   Not started\n"
        "another:process_with_colon      STARTING\n"
    )
    processes = parse_status_output(output)

    assert len(processes) == 3
    assert processes[0].uptime == "30 days, 5 hours 23 minutes 45 seconds"
    assert processes[2].name == "another:process_with_colon"
    assert processes[2].group == "another"
    assert processes[2].state == ProcessState.STARTING
    assert processes[2].pid == 0


def test_parse_unknown_state_word():
    processes = parse_status_output("job EXITED Oct 19 10:00 AM")
    assert len(processes) == 1
    assert processes[0].state == 0
    assert processes[0].state_name == "EXITED"
    assert processes[0].uptime == "Oct 19 10:00 AM"


def test_parse_bad_pid_defaults_to_zero():
    processes = parse_status_output("web RUNNING pid abc, uptime 0:00:10")
    assert processes[0].pid == 0
    assert processes[0].uptime == "00 minutes 10 seconds"


def test_is_process_line():
    assert is_process_line("web", "RUNNING pid 1, uptime 0:01:00")
    assert is_process_line("web", "Not started")
    assert not is_process_line("unix:///var/run/supervisor.sock", "no such file")
    assert not is_process_line("", "RUNNING")
