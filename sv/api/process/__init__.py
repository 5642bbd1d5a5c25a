"""Process module - resolution of user tokens and process control."""

from .._output_schemas.process import (
    ProcessRestartOutput,
    ProcessStartOutput,
    ProcessStatusOutput,
    ProcessStopOutput,
)
from .ControlResult import ControlResult
from .ProcessController import ACTIONS, ProcessController
from .ProcessInfo import ProcessInfo
from .ProcessState import ProcessState, state_code, state_description
from .ResolvedName import ResolvedName
from .resolve_tokens import resolve_names, resolve_tokens
from .validate_process_name import validate_process_name

__all__ = [
    "ACTIONS",
    "ControlResult",
    "ProcessController",
    "ProcessInfo",
    "ProcessRestartOutput",
    "ProcessStartOutput",
    "ProcessState",
    "ProcessStatusOutput",
    "ProcessStopOutput",
    "ResolvedName",
    "resolve_names",
    "resolve_tokens",
    "state_code",
    "state_description",
    "validate_process_name",
]
