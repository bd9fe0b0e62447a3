"""
Response envelope decoding.

Every reply has the shape ``{"type": <tag>, "data"?: <payload>}``. The tags
"list", "methods" and "result" all denote success; which one the server uses
depends on the request, but any of them is accepted. "error" carries a plain
message string. The payload shape is never read off the tag: the caller's
operation decides it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict

from devicerpc.config import DecoderConfig, get_config
from devicerpc.rpc.operations import ApiCall
from devicerpc.utils.exceptions import (
    DecodeError,
    MissingFieldError,
    PayloadShapeMismatchError,
    RemoteCallError,
    UnrecognizedTagError,
    sanitize_error_message,
)

T = TypeVar("T")

SUCCESS_TAGS = frozenset({"list", "methods", "result"})
ERROR_TAG = "error"


@dataclass(frozen=True)
class RpcSuccess(Generic[T]):
    payload: T


@dataclass(frozen=True)
class RpcFailure:
    message: str


RpcResponse = RpcSuccess | RpcFailure


@dataclass(slots=True)
class RpcOutcome:
    """Final per-request outcome handed to the caller."""

    ok: bool
    payload: Any | None = None
    error: str | None = None

    def unwrap(self) -> Any:
        if self.ok:
            return self.payload
        raise RemoteCallError(self.error or "")


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Any = None
    data: Any = None


def _load(raw: Any, config: DecoderConfig) -> Mapping[str, Any]:
    if isinstance(raw, (bytes, bytearray, str)):
        size = len(raw.encode("utf-8")) if isinstance(raw, str) else len(raw)
        if size > config.max_message_bytes:
            raise PayloadShapeMismatchError(
                f"response of {size} bytes exceeds limit of {config.max_message_bytes}",
                expected="object",
            )
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PayloadShapeMismatchError(f"response is not valid JSON: {e}", expected="object") from e
    if not isinstance(raw, Mapping):
        raise PayloadShapeMismatchError(
            f"response must be an object, got {type(raw).__name__}",
            expected="object",
        )
    return raw


def _decode(raw: Any, op: ApiCall, config: DecoderConfig) -> RpcSuccess | RpcFailure:
    envelope = _Envelope.model_validate(dict(_load(raw, config)))
    present = "data" in envelope.model_fields_set
    tag = envelope.type

    if tag == ERROR_TAG:
        if not present:
            raise MissingFieldError("data")
        # A non-string error payload is not reinterpreted as success.
        if not isinstance(envelope.data, str):
            raise PayloadShapeMismatchError(
                f"error message must be a string, got {type(envelope.data).__name__}",
                expected="string",
            )
        return RpcFailure(envelope.data)

    if isinstance(tag, str) and tag in SUCCESS_TAGS:
        if tag != op.expected_tag:
            logger.debug("Response to {} tagged {!r} (expected {!r})", op.name, tag, op.expected_tag)
        return RpcSuccess(op.decode_payload(envelope.data, present, strict=config.strict))

    raise UnrecognizedTagError(tag)


def decode_response(raw: Any, op: ApiCall, *, config: DecoderConfig | None = None) -> RpcSuccess | RpcFailure:
    """
    Decode one response envelope for a request of kind `op`.

    Args:
        raw: The envelope as a mapping, or its JSON text as str/bytes.
        op: The operation the pending request was made with.
        config: Decoder settings; the cached process config is used if omitted.

    Returns:
        RpcSuccess with the op-specific payload, or RpcFailure with the server's message.

    Raises:
        DecodeError: UnrecognizedTagError, PayloadShapeMismatchError or MissingFieldError.
    """
    cfg = config if config is not None else get_config()
    try:
        return _decode(raw, op, cfg)
    except DecodeError as e:
        if cfg.log_decode_failures:
            logger.warning("Failed to decode response to {}: {}", op.name, sanitize_error_message(str(e)))
        raise


def into_outcome(response: RpcSuccess | RpcFailure) -> RpcOutcome:
    """
    Collapse a decoded response into a success/failure outcome.

    An "error" envelope is always a failure. This cannot tell apart a server
    that reports an error where the operation's own success payload would be
    null; such responses are taken at their tag.
    """
    if isinstance(response, RpcSuccess):
        return RpcOutcome(ok=True, payload=response.payload)
    return RpcOutcome(ok=False, error=response.message)
