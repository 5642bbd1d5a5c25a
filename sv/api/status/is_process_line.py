"""Classify supervisorctl output lines."""

STATE_WORDS = ("running", "stopped", "starting", "stopping", "fatal", "backoff")
STATUS_HINTS = ("pid", "uptime", "not started", "exited")


def is_process_line(name: str, rest: str) -> bool:
    """True when ``rest`` looks like the status part of a process line."""
    if not name:
        return False
    lowered = rest.lower()
    return any(word in lowered for word in STATE_WORDS) or any(hint in lowered for hint in STATUS_HINTS)
