"""Reject process names that could be used for command or argument injection."""

import string

from ..errors import InvalidProcessNameError

FORBIDDEN_CHARS = frozenset("|;&`$()<>[]{}\\\"'")
ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + ":_-.")


def validate_process_name(name: str) -> None:
    """Raise unless ``name`` uses only letters, digits, ``:``, ``_``, ``-`` and ``.``.

    Raises:
        InvalidProcessNameError: If the name is empty or has any other character
    """
    if not name:
        raise InvalidProcessNameError("Process name is empty")
    if any(ch in FORBIDDEN_CHARS for ch in name):
        raise InvalidProcessNameError(f"Process name contains illegal characters: {name!r}")
    if any(ch not in ALLOWED_CHARS for ch in name):
        raise InvalidProcessNameError(f"Process name contains illegal characters: {name!r}")
