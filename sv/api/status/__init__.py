"""Status module - process listing from XML-RPC or supervisorctl output."""

from .format_uptime import format_uptime
from .parse_status_output import parse_status_output
from .StatusChannel import StatusChannel
from .StatusReader import StatusReader

__all__ = [
    "StatusChannel",
    "StatusReader",
    "format_uptime",
    "parse_status_output",
]
