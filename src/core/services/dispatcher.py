"""Capability dispatch: key -> class -> normalizer.

The match is closed over `CapabilityClass`; unknown keys fall through to a
`RawCapability` so the device stays usable for options not understood yet.
"""

from __future__ import annotations

from core.domain.capability_class import CapabilityClass
from core.domain.models import Capability, CapabilityEntry, RawCapability
from core.services.normalizers import (
    normalize_enumerated,
    normalize_integer_range,
    normalize_stepless_numeric,
    normalize_stepped_range,
)


def classify_key(key: str) -> CapabilityClass:
    return CapabilityClass.for_key(key)


def normalize_capability(entry: CapabilityEntry) -> Capability:
    """Normalize one raw entry according to the class of its key."""

    capability_class = classify_key(entry.key)

    if capability_class is CapabilityClass.ENUMERATED:
        return normalize_enumerated(entry)
    if capability_class is CapabilityClass.STEPLESS_NUMERIC:
        return normalize_stepless_numeric(entry)
    if capability_class is CapabilityClass.INTEGER_RANGE:
        return normalize_integer_range(entry)
    if capability_class is CapabilityClass.STEPPED_RANGE:
        return normalize_stepped_range(entry)

    return RawCapability(parameters=entry.parameters, default=entry.default)
