"""Utility functions for devicerpc."""

from devicerpc.utils.exceptions import (
    DeviceRpcError,
    DecodeError,
    UnrecognizedTagError,
    PayloadShapeMismatchError,
    MissingFieldError,
    RemoteCallError,
    ErrorCategory,
    sanitize_error_message,
    decode_error_result,
)
from devicerpc.utils.logging import configure_logging

__all__ = [
    "DeviceRpcError",
    "DecodeError",
    "UnrecognizedTagError",
    "PayloadShapeMismatchError",
    "MissingFieldError",
    "RemoteCallError",
    "ErrorCategory",
    "sanitize_error_message",
    "decode_error_result",
    "configure_logging",
]
