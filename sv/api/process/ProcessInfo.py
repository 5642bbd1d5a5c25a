"""ProcessInfo dataclass - one row of a status listing."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ProcessInfo:
    """A managed process as reported by one status query.

    ``index`` is the 1-based position in that listing and is not stable
    across queries.
    """

    index: int
    name: str
    group: str
    state: int
    state_name: str
    pid: int
    uptime: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
