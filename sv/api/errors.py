"""Exception hierarchy for SV operations."""


class SvError(Exception):
    """Base class for all errors raised by the SV API."""


class ConfigError(SvError):
    """Invalid or unreadable configuration."""


class RpcError(SvError):
    """Any failure of the XML-RPC channel."""


class RpcTransportError(RpcError):
    """Network failure or non-2xx HTTP response."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RpcDecodeError(RpcError):
    """Response body is not a well-formed methodResponse."""


class RpcFaultError(RpcError):
    """Fault reported by the remote daemon itself."""

    def __init__(self, fault_string: str | None, fault_code: int | None = None):
        if fault_string is None:
            message = "Unknown XML-RPC fault"
        else:
            message = f"XML-RPC fault: {fault_string}"
        super().__init__(message)
        self.fault_string = fault_string
        self.fault_code = fault_code


class StatusUnavailableError(SvError):
    """Neither status channel produced a process listing."""


class ResolveError(SvError):
    """A user token could not be turned into a process name."""


class InvalidIndexError(ResolveError):
    """One or more numeric indices fell outside the listing."""

    def __init__(self, indices: list[int], count: int):
        joined = ", ".join(str(i) for i in indices)
        super().__init__(f"Invalid process index: [{joined}] (valid range: 1-{count})")
        self.indices = list(indices)
        self.count = count


class ControlError(SvError):
    """A control action failed or was refused."""


class InvalidProcessNameError(ControlError):
    """Process name contains characters that are not allowed."""


class UnsupportedActionError(ControlError):
    """Action is not one of start, stop, restart."""
