"""Build ProcessInfo rows from decoded ``getAllProcessInfo`` structs."""

from typing import Any

from ..process.ProcessInfo import ProcessInfo
from ..process.ProcessState import state_description


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    # bool is an int subclass but never a valid state or pid
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def process_from_rpc(info: dict[str, Any], index: int) -> ProcessInfo:
    """Convert one struct; missing or mistyped members fall back to zero values.

    A program whose group shares its name is listed under the bare name, the
    same way supervisorctl prints it.
    """
    name = _as_str(info.get("name"))
    group = _as_str(info.get("group"))
    state = _as_int(info.get("state"))
    pid = _as_int(info.get("pid"))
    description = _as_str(info.get("description"))

    full_name = f"{group}:{name}" if group and name and group != name else name

    return ProcessInfo(
        index=index,
        name=full_name,
        group=group,
        state=state,
        state_name=_as_str(info.get("statename")),
        pid=pid,
        uptime=description if pid > 0 else "Stopped",
        description=state_description(state),
    )
