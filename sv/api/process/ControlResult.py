"""ControlResult dataclass - outcome of one control action."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ControlResult:
    name: str
    success: bool
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
