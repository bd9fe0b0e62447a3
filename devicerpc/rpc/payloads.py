"""Payload decoders for the `data` field of a response envelope.

Each decoder receives the raw `data` value and whether the key was present at
all. Absence is meaningful: servers omit `data` for methods that return
nothing, so "absent" and "null" are not interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from devicerpc.rpc.descriptors import DeviceDescriptor, MethodDescriptor
from devicerpc.utils.exceptions import MissingFieldError, PayloadShapeMismatchError


@dataclass(frozen=True)
class Unit:
    """Return shape of a method that declares no return value."""


@dataclass(frozen=True)
class Value:
    """Return shape of a method that returns a value of `type` (any annotation pydantic accepts)."""
    type: Any


ReturnShape = Unit | Value


def return_shape(return_type: Any) -> ReturnShape:
    """Map a Python return annotation to its shape; `None`/`NoneType` mean void."""
    if isinstance(return_type, (Unit, Value)):
        return return_type
    if return_type is None or return_type is type(None):
        return Unit()
    return Value(return_type)


@lru_cache(maxsize=256)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def _describe(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))


def _decode_sequence(data: Any, present: bool, item_type: type, expected: str) -> tuple:
    if not present:
        raise PayloadShapeMismatchError(f"expected {expected}, but `data` is absent", expected=expected)
    if not isinstance(data, (list, tuple)):
        raise PayloadShapeMismatchError(
            f"expected {expected}, got {type(data).__name__}",
            expected=expected,
        )
    try:
        items = _adapter(list[item_type]).validate_python(data)
    except ValidationError as e:
        raise PayloadShapeMismatchError(
            f"invalid element in {expected}: {_first_error(e)}",
            expected=expected,
        ) from e
    return tuple(items)


def decode_device_list(data: Any, present: bool) -> tuple[DeviceDescriptor, ...]:
    """Decode a `list` payload, keeping server order."""
    return _decode_sequence(data, present, DeviceDescriptor, "device list")


def decode_method_list(data: Any, present: bool) -> tuple[MethodDescriptor, ...]:
    """Decode a `methods` payload, keeping server order."""
    return _decode_sequence(data, present, MethodDescriptor, "method list")


def decode_invoke_payload(data: Any, present: bool, returns: ReturnShape, *, strict: bool = True) -> Any:
    """
    Decode the result of a method invocation.

    The void case is decided by `returns` alone: a `Unit` method yields `None`
    when `data` is absent, while a `Value` method with no `data` is a protocol
    violation and raises MissingFieldError. A missing field is never defaulted,
    even if the value type itself accepts None.

    Values are validated in JSON mode, so JSON forms such as arrays for tuples
    or ISO strings for datetimes are accepted. With `strict` (the default) no
    cross-type coercion happens: "5" is not an int and 1 is not a bool.

    Raises:
        MissingFieldError: `data` absent for a method that returns a value.
        PayloadShapeMismatchError: `data` present but not decodable as the return type.
    """
    if isinstance(returns, Unit):
        if not present or data is None:
            return None
        raise PayloadShapeMismatchError(
            f"method returns nothing, but got {type(data).__name__} payload",
            expected="null",
        )

    if not present:
        raise MissingFieldError("data")

    expected = _describe(returns.type)
    try:
        encoded = to_json(data)
    except PydanticSerializationError as e:
        raise PayloadShapeMismatchError(f"result is not JSON data: {e}", expected=expected) from e
    try:
        return _adapter(returns.type).validate_json(encoded, strict=strict)
    except ValidationError as e:
        raise PayloadShapeMismatchError(
            f"result is not a valid {expected}: {_first_error(e)}",
            expected=expected,
        ) from e
