"""Parse XML-RPC ``methodResponse`` bodies into WireValues."""

import xml.etree.ElementTree as ET

from ..errors import RpcDecodeError, RpcFaultError
from .WireValue import WireValue

_INT_TAGS = ("int", "i4", "i8")

# Nested arrays/structs deeper than this are rejected rather than recursed into
MAX_NESTING = 64


def parse_value_element(element: ET.Element, depth: int = 0) -> WireValue:
    """Read one ``<value>`` element.

    Raises:
        RpcDecodeError: If a typed element holds text of the wrong shape, or
            arrays and structs nest more than ``MAX_NESTING`` levels deep
    """
    children = list(element)
    if not children:
        # Untyped value text is a string
        return WireValue(string=element.text or "", kind="string")

    typed = children[0]
    tag = typed.tag
    text = (typed.text or "").strip()
    try:
        if tag == "string":
            return WireValue(string=typed.text or "", kind="string")
        if tag in _INT_TAGS:
            return WireValue(integer=int(text), kind="int")
        if tag == "boolean":
            if text not in ("0", "1"):
                raise ValueError(f"boolean must be 0 or 1, got {text!r}")
            return WireValue(boolean=text == "1", kind="boolean")
        if tag == "double":
            return WireValue(double=float(text), kind="double")
    except ValueError as e:
        raise RpcDecodeError(f"Invalid <{tag}> value: {e}") from e

    if tag in ("array", "struct") and depth >= MAX_NESTING:
        raise RpcDecodeError(f"Response nested too deeply (more than {MAX_NESTING} levels)")
    if tag == "array":
        return WireValue(
            array=[parse_value_element(item, depth + 1) for item in typed.findall("data/value")],
            kind="array",
        )
    if tag == "struct":
        members: list[tuple[str, WireValue]] = []
        for member in typed.findall("member"):
            name = member.findtext("name", default="")
            value = member.find("value")
            members.append((name, parse_value_element(value, depth + 1) if value is not None else WireValue()))
        return WireValue(struct=members, kind="struct")
    if tag == "nil":
        return WireValue()
    # Unknown element types keep all fields at their defaults
    return WireValue()


def parse_response(body: bytes | str) -> WireValue | None:
    """Parse a response body.

    Returns:
        The first result value, or None when the response has no params.

    Raises:
        RpcFaultError: If the response carries a fault
        RpcDecodeError: If the body is not a well-formed methodResponse
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise RpcDecodeError(f"XML parse failed: {e}") from e

    if root.tag != "methodResponse":
        raise RpcDecodeError(f"Expected <methodResponse>, got <{root.tag}>")

    fault = root.find("fault/value")
    if fault is not None:
        fault_value = parse_value_element(fault)
        fault_string = fault_value.member("faultString")
        fault_code = fault_value.member("faultCode")
        raise RpcFaultError(
            fault_string.string if fault_string is not None else None,
            fault_code.integer if fault_code is not None else None,
        )
    if root.find("fault") is not None:
        raise RpcFaultError(None)

    param_value = root.find("params/param/value")
    if param_value is None:
        return None
    return parse_value_element(param_value)
