"""Device and method descriptor shapes returned by the list/methods operations.

Only the structure is checked here. Unknown keys are preserved so newer servers
can add metadata without breaking older clients.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Descriptor(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


class DeviceDescriptor(_Descriptor):
    """A device attached to the remote host."""
    address: str  # Opaque device address, used as the target of invoke calls
    type: str  # Device type name, e.g. "gpu", "redstone"
    label: str | None = None


class ParamDescriptor(_Descriptor):
    """One parameter of a device method."""
    name: str
    type: str
    optional: bool = False


class MethodDescriptor(_Descriptor):
    """A method exposed by a device."""
    name: str
    params: tuple[ParamDescriptor, ...] = Field(default_factory=tuple)
    returns: str | None = None  # None for methods without a return value
    doc: str | None = None
    direct: bool = False
