"""Output schemas for RPC configuration commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RpcCheckOutput(BaseOutputSchema):
    """Output schema for rpc check."""
    config_path: str = Field(..., description="supervisord config inspected, empty string if none found")
    inet_http_server: bool = Field(..., description="Whether [inet_http_server] has a port")
    rpc_interface: bool = Field(..., description="Whether [rpcinterface:supervisor] is configured")


class RpcEnableOutput(BaseOutputSchema):
    """Output schema for rpc enable."""
    config_path: str = Field(..., description="supervisord config modified, empty string if none found")
    changed: list[str] = Field(..., description="Sections added to the config")
    restarted: bool = Field(..., description="Whether supervisord was restarted")


register_output_schema("rpc", "check", RpcCheckOutput)
register_output_schema("rpc", "enable", RpcEnableOutput)
