"""Resolve user tokens (index, range, name) into canonical process names."""

import re
from collections.abc import Sequence

from ..errors import InvalidIndexError, ResolveError
from .ProcessInfo import ProcessInfo
from .ResolvedName import ResolvedName

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    return int(text) if _INT_RE.fullmatch(text) else None


def _resolve_range(token: str, processes: Sequence[ProcessInfo]) -> list[ResolvedName]:
    parts = token.split("-")
    if len(parts) != 2:
        raise ResolveError(f"Invalid range format: {token}")
    start, end = _parse_int(parts[0]), _parse_int(parts[1])
    if start is None or end is None:
        raise ResolveError(f"Invalid range numbers: {token}")
    if start < 1 or end > len(processes) or start > end:
        raise ResolveError(f"Range out of bounds: {token} (valid range: 1-{len(processes)})")
    return [ResolvedName(name=proc.name, token=token) for proc in processes[start - 1 : end]]


def _resolve_name(token: str, processes: Sequence[ProcessInfo]) -> ResolvedName:
    if ":" in token:
        return ResolvedName(name=token, token=token)
    for proc in processes:
        if proc.name == token or (":" in proc.name and proc.name.split(":", 1)[1] == token):
            return ResolvedName(name=proc.name, token=token)
    return ResolvedName(name=token, token=token, forwarded=True)


def resolve_tokens(tokens: Sequence[str], processes: Sequence[ProcessInfo]) -> list[ResolvedName]:
    """Map tokens to process names, preserving order and duplicates.

    Tokens are handled as:

    - ``a-b``: inclusive index range, validated immediately
    - ``n``: 1-based index; out-of-range indices are collected and reported together
    - ``group:name``: used verbatim
    - ``name``: first process named ``name`` or ``*:name``, else forwarded unchanged

    Raises:
        ResolveError: Malformed or out-of-bounds range
        InvalidIndexError: One or more indices outside ``1..len(processes)``
    """
    resolved: list[ResolvedName] = []
    invalid_indices: list[int] = []

    for token in tokens:
        if "-" in token:
            resolved.extend(_resolve_range(token, processes))
            continue

        index = _parse_int(token)
        if index is None:
            resolved.append(_resolve_name(token, processes))
            continue

        if index < 1 or index > len(processes):
            invalid_indices.append(index)
            continue
        resolved.append(ResolvedName(name=processes[index - 1].name, token=token))

    if invalid_indices:
        raise InvalidIndexError(invalid_indices, len(processes))
    return resolved


def resolve_names(tokens: Sequence[str], processes: Sequence[ProcessInfo]) -> list[str]:
    """Same as ``resolve_tokens`` but returns plain names."""
    return [item.name for item in resolve_tokens(tokens, processes)]
