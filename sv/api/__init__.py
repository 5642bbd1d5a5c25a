"""API module for SV.

Command functions (``cmd_*``) return a StageResult and are shared by the CLI
and any other front end.
"""

__all__ = []
