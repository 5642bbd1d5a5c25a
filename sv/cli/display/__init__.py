"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay, state_style

__all__ = ["CLIDisplay", "state_style"]
