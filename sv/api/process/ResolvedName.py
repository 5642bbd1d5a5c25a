"""ResolvedName dataclass - output of token resolution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedName:
    """Canonical process name produced from one user token.

    ``forwarded`` is True for a bare name that matched nothing in the listing;
    it is passed on unchanged so the control call reports the real error.
    """

    name: str
    token: str
    forwarded: bool = False
