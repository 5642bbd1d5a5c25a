"""RPC module - XML-RPC codec, transport and supervisord config detection."""

from .._output_schemas.rpc import RpcCheckOutput, RpcEnableOutput
from .ConfigDetector import ConfigDetector, RpcConfigStatus
from .decode_value import decode_value
from .encode_call import encode_call, encode_value
from .parse_response import parse_response, parse_value_element
from .RpcClient import RpcClient
from .WireValue import WireValue

__all__ = [
    "ConfigDetector",
    "RpcCheckOutput",
    "RpcClient",
    "RpcConfigStatus",
    "RpcEnableOutput",
    "WireValue",
    "decode_value",
    "encode_call",
    "encode_value",
    "parse_response",
    "parse_value_element",
]
