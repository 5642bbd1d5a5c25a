"""Parse ``supervisorctl status`` output into ProcessInfo rows."""

from ..process.ProcessInfo import ProcessInfo
from ..process.ProcessState import ProcessState, state_code, state_description
from .format_uptime import format_uptime
from .is_process_line import is_process_line

_DAY_WORDS = ("day", "days")


def _strip_comma(field: str) -> str:
    return field[:-1] if field.endswith(",") else field


def _read_uptime(fields: list[str], at: int) -> str:
    """Uptime starting at ``fields[at]``, which follows the ``uptime`` keyword."""
    token = _strip_comma(fields[at])
    # "uptime 30 days, 16:17:38"
    if token.isdigit() and at + 2 < len(fields) and _strip_comma(fields[at + 1]) in _DAY_WORDS:
        unit = _strip_comma(fields[at + 1])
        return f"{token} {unit}, {format_uptime(_strip_comma(fields[at + 2]))}"
    return format_uptime(token)


def _trailing_text(fields: list[str]) -> str:
    """Text after the state name with any ``pid <n>`` pair removed."""
    parts: list[str] = []
    skip_next = False
    for part in fields[1:]:
        if skip_next:
            skip_next = False
            continue
        if part == "pid":
            skip_next = True
            continue
        parts.append(part)
    return " ".join(parts)


def parse_status_output(output: str) -> list[ProcessInfo]:
    """Parse status text, skipping lines that are not process status lines.

    Each kept line is ``<name> <STATE> [pid <n>,] [uptime <t>|<description>]``.
    Indices are assigned sequentially to the kept lines only.
    """
    processes: list[ProcessInfo] = []

    for raw_line in output.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        parts = line.split(None, 1)
        name = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ""

        if not is_process_line(name, rest):
            continue

        fields = rest.split()
        if not fields:
            continue

        state_name = fields[0]
        pid = 0
        uptime = ""
        for i, field in enumerate(fields):
            if field == "pid" and i + 1 < len(fields):
                try:
                    pid = int(_strip_comma(fields[i + 1]))
                except ValueError:
                    pid = 0
            if field == "uptime" and i + 1 < len(fields):
                uptime = _read_uptime(fields, i + 1)
                break

        if not uptime and state_name.upper() != ProcessState.RUNNING.name:
            uptime = _trailing_text(fields)

        state = state_code(state_name)
        processes.append(
            ProcessInfo(
                index=len(processes) + 1,
                name=name,
                group=name.split(":", 1)[0] if ":" in name else "",
                state=state,
                state_name=state_name,
                pid=pid,
                uptime=uptime,
                description=state_description(state),
            )
        )

    return processes
