"""Decode a WireValue into a native Python value."""

from typing import Any

from .WireValue import WireValue


def decode_value(value: WireValue) -> Any:
    """Resolve a WireValue by fixed field precedence.

    The wire shape cannot tell "integer 0" apart from "no value", so the order is:
    string, integer (non-zero, or nothing else set), true boolean, non-zero
    double, non-empty array, non-empty struct, else None.
    """
    if value.string != "":
        return value.string
    nothing_else = (
        not value.boolean and value.double == 0 and not value.array and not value.struct
    )
    if value.integer != 0 or nothing_else:
        return value.integer
    if value.boolean:
        return True
    if value.double != 0:
        return value.double
    if value.array:
        return [decode_value(item) for item in value.array]
    if value.struct:
        return {name: decode_value(member) for name, member in value.struct}
    return None
