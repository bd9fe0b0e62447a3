"""
Exception hierarchy and error handling utilities for devicerpc.

Provides:
- Custom exception classes with error codes
- Error categorization (validation, remote, fatal)
- Safe error message formatting (no sensitive data leak)
- Mapping of decode failures to RPC result triples for the dispatch layer
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    REMOTE = "remote"
    FATAL = "fatal"


class DeviceRpcError(Exception):
    """Base exception for all devicerpc errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class DecodeError(DeviceRpcError):
    """A response could not be decoded. Terminal for that response only."""

    def __init__(self, message: str, code: str = "DECODE_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message, code=code, category=ErrorCategory.VALIDATION, details=details)


class UnrecognizedTagError(DecodeError):
    """Envelope `type` is not one of the known tags."""

    def __init__(self, tag: Any):
        super().__init__(
            f"unrecognized response tag: {tag!r}",
            code="UNRECOGNIZED_TAG",
            details={"tag": tag},
        )
        self.tag = tag


class PayloadShapeMismatchError(DecodeError):
    """Payload is present but does not have the shape the operation expects."""

    def __init__(self, message: str, expected: str | None = None):
        details = {"expected": expected} if expected else {}
        super().__init__(message, code="PAYLOAD_SHAPE_MISMATCH", details=details)
        self.expected = expected


class MissingFieldError(DecodeError):
    """A required envelope field is absent."""

    def __init__(self, field: str):
        super().__init__(f"missing field `{field}`", code="MISSING_FIELD", details={"field": field})
        self.field = field


class RemoteCallError(DeviceRpcError):
    """The server answered with an error envelope."""

    def __init__(self, message: str):
        super().__init__(message, code="REMOTE_ERROR", category=ErrorCategory.REMOTE)


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-zA-Z0-9]{32,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


RpcResult = tuple[bool, Any | None, dict[str, Any] | None]


def decode_error_result(
    *,
    method: str,
    exc: DecodeError,
    log_warning: Callable[..., None],
    rpc_error: Callable[[str, str, dict[str, Any] | None], dict[str, Any]],
) -> RpcResult:
    """Map a DecodeError to the standard (ok, payload, error) triple for a pending request."""
    message = sanitize_error_message(exc.message)
    log_warning("RPC response for {} failed to decode with {}: {}", method, exc.code, message)
    return False, None, rpc_error(exc.code, message, exc.details)
