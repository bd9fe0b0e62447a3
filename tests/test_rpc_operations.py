"""Tests for operation kinds and their payload capability."""

from __future__ import annotations

import pytest

from devicerpc.rpc import ApiCall, Invoke, ListDevices, ListMethods, Unit, Value
from devicerpc.utils.exceptions import MissingFieldError


def test_operations_implement_api_call() -> None:
    for op in (ListDevices(), ListMethods("a1"), Invoke.of("a1", "beep")):
        assert isinstance(op, ApiCall)


def test_expected_tags() -> None:
    assert ListDevices.expected_tag == "list"
    assert ListMethods.expected_tag == "methods"
    assert Invoke.expected_tag == "result"


def test_names() -> None:
    assert ListDevices().name == "list"
    assert ListMethods("a1").name == "methods(a1)"
    assert Invoke.of("a1", "beep").name == "invoke(a1.beep)"


def test_invoke_of_maps_return_shape() -> None:
    assert Invoke.of("a1", "beep").returns == Unit()
    assert Invoke.of("a1", "beep").is_void
    op = Invoke.of("a1", "getEnergy", float)
    assert op.returns == Value(float)
    assert not op.is_void


def test_invoke_defaults_to_void() -> None:
    assert Invoke("a1", "beep") == Invoke.of("a1", "beep", None)


def test_operations_are_hashable_values() -> None:
    assert {Invoke.of("a1", "m", int), Invoke.of("a1", "m", int)} == {Invoke.of("a1", "m", int)}


def test_invoke_decode_payload_dispatches_on_shape() -> None:
    assert Invoke.of("a1", "beep").decode_payload(None, False) is None
    with pytest.raises(MissingFieldError):
        Invoke.of("a1", "getEnergy", float).decode_payload(None, False)


def test_list_methods_decode_payload() -> None:
    methods = ListMethods("a1").decode_payload([{"name": "beep"}], True)
    assert methods[0].name == "beep"
