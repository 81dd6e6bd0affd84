"""Domain models (Pydantic v2).

Two stages of the same device live here:
- `CapabilityEntry` / `ParsedListing`: what the listing scanner extracted, still
  free text.
- `Capability` / `DeviceModel`: normalized, typed and cacheable.

`Capability` is a discriminated union on `kind`, so a cached `DeviceModel`
validates back into the right variants without re-reading any parameter text.
NaN is serialized as the JSON constant `NaN` so a malformed capability survives
a round-trip through the cache.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

IntOrNaN = Union[int, float]


class CapabilityEntry(BaseModel):
    """One active capability line of the listing, before normalization."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        min_length=1,
        description="Capability flag as printed by scanimage (e.g. '--mode', '-l').",
    )
    parameters: str = Field(
        default="",
        description="Free-text constraint description between the key and the default.",
    )
    default: str = Field(
        ...,
        description="Current/default value, taken from the trailing brackets.",
    )


class ParsedListing(BaseModel):
    """Device in progress: identifier plus raw entries in listing order."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Backend device string from the listing banner.")
    entries: dict[str, CapabilityEntry] = Field(default_factory=dict)


class _CapabilityBase(BaseModel):
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    parameters: str = Field(
        default="",
        description="Raw parameter text the capability was normalized from.",
    )


class EnumeratedCapability(_CapabilityBase):
    kind: Literal["enumerated"] = "enumerated"
    options: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Choices in declared order.",
    )
    default: str = ""


class SteplessNumericCapability(_CapabilityBase):
    kind: Literal["stepless_numeric"] = "stepless_numeric"
    options: tuple[float, ...] = Field(
        default_factory=tuple,
        description="Discrete values in ascending order.",
    )
    default: float = float("nan")


class IntegerRangeCapability(_CapabilityBase):
    kind: Literal["integer_range"] = "integer_range"
    limits: tuple[IntOrNaN, IntOrNaN] = Field(
        ...,
        description="(low, high) floored to integers; NaN when not a number.",
    )
    default: IntOrNaN = float("nan")


class SteppedRangeCapability(_CapabilityBase):
    kind: Literal["stepped_range"] = "stepped_range"
    limits: tuple[float, float] = Field(..., description="(low, high) as real numbers.")
    interval: int = Field(default=1, ge=0, description="Step between selectable values.")
    default: float = float("nan")


class RawCapability(_CapabilityBase):
    """Capability this system does not normalize; kept as opaque text."""

    kind: Literal["raw"] = "raw"
    default: str = ""


Capability = Annotated[
    Union[
        EnumeratedCapability,
        SteplessNumericCapability,
        IntegerRangeCapability,
        SteppedRangeCapability,
        RawCapability,
    ],
    Field(discriminator="kind"),
]


class DeviceModel(BaseModel):
    """Aggregate: one scanner and its normalized capabilities.

    Immutable once built; a refresh builds a new model and overwrites the cache.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    id: str = Field(..., description="Backend device string (e.g. 'epson2:libusb:001:004').")
    version: str = Field(
        ...,
        min_length=1,
        description="Application version at assembly time; cache-validity token.",
    )
    features: dict[str, Capability] = Field(
        default_factory=dict,
        description="Normalized capabilities keyed by their flag, in listing order.",
    )
