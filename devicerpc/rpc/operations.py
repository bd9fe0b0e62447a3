"""Operation kinds of the device API and their response payload shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

from devicerpc.rpc.descriptors import DeviceDescriptor, MethodDescriptor
from devicerpc.rpc.payloads import (
    ReturnShape,
    Unit,
    decode_device_list,
    decode_invoke_payload,
    decode_method_list,
    return_shape,
)


@runtime_checkable
class ApiCall(Protocol):
    """An operation that knows how to decode the payload of its own success response."""

    expected_tag: ClassVar[str]

    @property
    def name(self) -> str:
        ...

    def decode_payload(self, data: Any, present: bool, *, strict: bool = True) -> Any:
        ...


@dataclass(frozen=True, slots=True)
class ListDevices:
    """List the devices attached to the host."""

    expected_tag: ClassVar[str] = "list"

    @property
    def name(self) -> str:
        return "list"

    def decode_payload(self, data: Any, present: bool, *, strict: bool = True) -> tuple[DeviceDescriptor, ...]:
        return decode_device_list(data, present)


@dataclass(frozen=True, slots=True)
class ListMethods:
    """List the methods of one device."""

    address: str
    expected_tag: ClassVar[str] = "methods"

    @property
    def name(self) -> str:
        return f"methods({self.address})"

    def decode_payload(self, data: Any, present: bool, *, strict: bool = True) -> tuple[MethodDescriptor, ...]:
        return decode_method_list(data, present)


@dataclass(frozen=True, slots=True)
class Invoke:
    """
    Invoke `method` on the device at `address`.

    `returns` is the statically known return shape: Unit() for methods that
    return nothing, Value(T) otherwise. Use Invoke.of() to build it from a
    plain annotation.
    """

    address: str
    method: str
    returns: ReturnShape = Unit()
    expected_tag: ClassVar[str] = "result"

    @classmethod
    def of(cls, address: str, method: str, return_type: Any = None) -> Invoke:
        return cls(address, method, return_shape(return_type))

    @property
    def name(self) -> str:
        return f"invoke({self.address}.{self.method})"

    @property
    def is_void(self) -> bool:
        return isinstance(self.returns, Unit)

    def decode_payload(self, data: Any, present: bool, *, strict: bool = True) -> Any:
        return decode_invoke_payload(data, present, self.returns, strict=strict)
