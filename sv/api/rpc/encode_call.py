"""Encode XML-RPC method calls."""

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from typing import Any

from .WireValue import WireValue


def encode_value(param: Any) -> WireValue | None:
    """Translate a native parameter into a WireValue.

    Returns None for unsupported types; callers drop those silently.
    """
    # bool before int: bool is an int subclass
    if isinstance(param, bool):
        return WireValue(boolean=param, kind="boolean")
    if isinstance(param, str):
        return WireValue(string=param, kind="string")
    if isinstance(param, int):
        return WireValue(integer=param, kind="int")
    if isinstance(param, float):
        return WireValue(double=param, kind="double")
    if isinstance(param, (list, tuple)):
        items = [encoded for encoded in (encode_value(item) for item in param) if encoded is not None]
        return WireValue(array=items, kind="array")
    if isinstance(param, dict):
        members: list[tuple[str, WireValue]] = []
        for name, member in param.items():
            encoded = encode_value(member)
            if encoded is not None:
                members.append((str(name), encoded))
        return WireValue(struct=members, kind="struct")
    return None


def _value_element(value: WireValue) -> ET.Element:
    element = ET.Element("value")
    kind = value.kind
    if kind == "string":
        ET.SubElement(element, "string").text = value.string
    elif kind == "int":
        ET.SubElement(element, "int").text = str(value.integer)
    elif kind == "boolean":
        ET.SubElement(element, "boolean").text = "1" if value.boolean else "0"
    elif kind == "double":
        ET.SubElement(element, "double").text = repr(value.double)
    elif kind == "array":
        data = ET.SubElement(ET.SubElement(element, "array"), "data")
        for item in value.array:
            data.append(_value_element(item))
    elif kind == "struct":
        struct = ET.SubElement(element, "struct")
        for name, member_value in value.struct:
            member = ET.SubElement(struct, "member")
            ET.SubElement(member, "name").text = name
            member.append(_value_element(member_value))
    return element


def encode_call(method: str, params: Sequence[Any] | None = None) -> bytes:
    """Build a ``methodCall`` document for ``method`` with ``params``."""
    root = ET.Element("methodCall")
    ET.SubElement(root, "methodName").text = method
    params_element = ET.SubElement(root, "params")
    for param in params or ():
        value = encode_value(param)
        if value is None:
            continue
        ET.SubElement(params_element, "param").append(_value_element(value))
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)
