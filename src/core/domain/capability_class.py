"""Capability classes known to the normalizers.

The key vocabulary is fixed by `scanimage -A`, so the table below is closed:
anything not listed is a passthrough capability kept as raw text.
"""

from __future__ import annotations

from enum import Enum


class CapabilityClass(str, Enum):
    """Normalization class of a capability, derived only from its key."""

    ENUMERATED = "enumerated"
    STEPLESS_NUMERIC = "stepless_numeric"
    INTEGER_RANGE = "integer_range"
    STEPPED_RANGE = "stepped_range"
    PASSTHROUGH = "raw"

    @classmethod
    def for_key(cls, key: str) -> "CapabilityClass":
        """Return the class for a capability key (`PASSTHROUGH` when unknown)."""

        return _KEY_CLASSES.get(key, cls.PASSTHROUGH)


_KEY_CLASSES: dict[str, CapabilityClass] = {
    "--mode": CapabilityClass.ENUMERATED,
    "--resolution": CapabilityClass.STEPLESS_NUMERIC,
    "-l": CapabilityClass.INTEGER_RANGE,
    "-t": CapabilityClass.INTEGER_RANGE,
    "-x": CapabilityClass.INTEGER_RANGE,
    "-y": CapabilityClass.INTEGER_RANGE,
    "--brightness": CapabilityClass.STEPPED_RANGE,
    "--contrast": CapabilityClass.STEPPED_RANGE,
}
