"""Output schemas for process commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ProcessStatusOutput(BaseOutputSchema):
    """Output schema for the status command.

    All fields must always be present for consistency.
    """
    channel: str = Field(..., description="Source of the listing: 'rpc', 'fallback', or 'none' on failure")
    count: int = Field(..., description="Number of processes listed")
    processes: list[dict[str, Any]] = Field(..., description="ProcessInfo rows in listing order")


class ProcessControlOutput(BaseOutputSchema):
    """Shared shape of start/stop/restart output."""
    action: str = Field(..., description="Control action: 'start', 'stop' or 'restart'")
    targets: list[str] = Field(..., description="Resolved process names, empty if resolution failed")
    forwarded: list[str] = Field(..., description="Names passed through without a match in the listing")
    results: list[dict[str, Any]] = Field(..., description="One {name, success, error} entry per target")
    succeeded: int = Field(..., description="Number of targets that succeeded")
    failed: int = Field(..., description="Number of targets that failed")


class ProcessStartOutput(ProcessControlOutput):
    """Output schema for the start command."""


class ProcessStopOutput(ProcessControlOutput):
    """Output schema for the stop command."""


class ProcessRestartOutput(ProcessControlOutput):
    """Output schema for the restart command."""


register_output_schema("process", "status", ProcessStatusOutput)
register_output_schema("process", "start", ProcessStartOutput)
register_output_schema("process", "stop", ProcessStopOutput)
register_output_schema("process", "restart", ProcessRestartOutput)
