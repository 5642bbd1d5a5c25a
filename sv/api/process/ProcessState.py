"""Supervisord process state codes."""

from enum import IntEnum


class ProcessState(IntEnum):
    STOPPED = 0
    STARTING = 10
    RUNNING = 20
    STOPPING = 30
    FATAL = 100
    BACKOFF = 200


_DESCRIPTIONS: dict[int, str] = {
    ProcessState.RUNNING: "Running",
    ProcessState.STARTING: "Starting",
    ProcessState.STOPPING: "Stopping",
    ProcessState.STOPPED: "Stopped",
    ProcessState.FATAL: "Fatal error",
    ProcessState.BACKOFF: "Backing off",
}


def state_code(state_name: str) -> int:
    """Map a state name to its code, case-insensitively. Unknown names map to 0."""
    member = ProcessState.__members__.get(state_name.strip().upper())
    return int(member) if member is not None else int(ProcessState.STOPPED)


def state_description(state: int) -> str:
    """Fixed human-readable annotation for a state code."""
    return _DESCRIPTIONS.get(state, "Unknown")
