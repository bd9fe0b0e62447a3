"""Response decoding for the device-control RPC API."""

from devicerpc.rpc.descriptors import DeviceDescriptor, MethodDescriptor, ParamDescriptor
from devicerpc.rpc.operations import ApiCall, Invoke, ListDevices, ListMethods
from devicerpc.rpc.payloads import Unit, Value, return_shape
from devicerpc.rpc.response import (
    ERROR_TAG,
    SUCCESS_TAGS,
    RpcFailure,
    RpcOutcome,
    RpcResponse,
    RpcSuccess,
    decode_response,
    into_outcome,
)

__all__ = [
    "ApiCall",
    "DeviceDescriptor",
    "ERROR_TAG",
    "Invoke",
    "ListDevices",
    "ListMethods",
    "MethodDescriptor",
    "ParamDescriptor",
    "RpcFailure",
    "RpcOutcome",
    "RpcResponse",
    "RpcSuccess",
    "SUCCESS_TAGS",
    "Unit",
    "Value",
    "decode_response",
    "into_outcome",
    "return_shape",
]
