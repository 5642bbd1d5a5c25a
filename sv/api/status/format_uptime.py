"""Format supervisorctl uptime tokens for display."""

import re

_HMS_RE = re.compile(r"(\d+):(\d{1,2}):(\d{1,2})")
_MS_RE = re.compile(r"(\d{1,2}):(\d{1,2})")


def format_uptime(token: str) -> str:
    """Format ``H:MM:SS`` or ``MM:SS``; return anything else unchanged.

    >>> format_uptime("1:59:48")
    '1 hours 59 minutes 48 seconds'
    >>> format_uptime("0:05:07")
    '05 minutes 07 seconds'
    """
    token = token.strip()
    match = _HMS_RE.fullmatch(token)
    if match:
        hours, minutes, seconds = (int(part) for part in match.groups())
        if hours > 0:
            return f"{hours} hours {minutes:02d} minutes {seconds:02d} seconds"
        return f"{minutes:02d} minutes {seconds:02d} seconds"
    match = _MS_RE.fullmatch(token)
    if match:
        minutes, seconds = (int(part) for part in match.groups())
        return f"{minutes:02d} minutes {seconds:02d} seconds"
    return token
