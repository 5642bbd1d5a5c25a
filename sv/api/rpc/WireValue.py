"""WireValue dataclass - one XML-RPC parameter or result."""

from dataclasses import dataclass, field
from typing import Literal

WireKind = Literal["string", "int", "boolean", "double", "array", "struct"]


@dataclass
class WireValue:
    """Tagged union of XML-RPC value variants.

    Every variant field is always present at its zero value. ``kind`` records
    which element the value was read from or encoded as, and is only used for
    serialization; decoding goes through ``decode_value`` precedence.
    """

    string: str = ""
    integer: int = 0
    boolean: bool = False
    double: float = 0.0
    array: list["WireValue"] = field(default_factory=list)
    struct: list[tuple[str, "WireValue"]] = field(default_factory=list)
    kind: WireKind | None = None

    def member(self, name: str) -> "WireValue | None":
        """First struct member called ``name``, or None."""
        for member_name, value in self.struct:
            if member_name == name:
                return value
        return None
