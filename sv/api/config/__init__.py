"""Config module - environment-driven settings."""

from .SvConfig import DEFAULT_HOST, SvConfig

__all__ = ["DEFAULT_HOST", "SvConfig"]
