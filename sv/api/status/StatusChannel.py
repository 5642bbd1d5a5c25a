"""Which channel produced a process listing."""

from enum import Enum


class StatusChannel(str, Enum):
    NONE = "none"
    RPC = "rpc"
    FALLBACK = "fallback"
