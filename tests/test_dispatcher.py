import pytest

from core.domain.capability_class import CapabilityClass
from core.domain.models import (
    CapabilityEntry,
    EnumeratedCapability,
    IntegerRangeCapability,
    RawCapability,
    SteplessNumericCapability,
    SteppedRangeCapability,
)
from core.services.dispatcher import classify_key, normalize_capability


@pytest.mark.parametrize(
    "key, expected",
    [
        ("--mode", CapabilityClass.ENUMERATED),
        ("--resolution", CapabilityClass.STEPLESS_NUMERIC),
        ("-l", CapabilityClass.INTEGER_RANGE),
        ("-t", CapabilityClass.INTEGER_RANGE),
        ("-x", CapabilityClass.INTEGER_RANGE),
        ("-y", CapabilityClass.INTEGER_RANGE),
        ("--brightness", CapabilityClass.STEPPED_RANGE),
        ("--contrast", CapabilityClass.STEPPED_RANGE),
        ("--source", CapabilityClass.PASSTHROUGH),
        ("--depth", CapabilityClass.PASSTHROUGH),
    ],
)
def test_classify_key(key, expected):
    assert classify_key(key) is expected


def test_dispatch_selects_variant_by_key_only():
    # Same text, different keys, different shapes.
    as_range = normalize_capability(CapabilityEntry(key="-x", parameters="0..100", default="5"))
    as_lighting = normalize_capability(CapabilityEntry(key="--contrast", parameters="0..100", default="5"))
    as_resolution = normalize_capability(CapabilityEntry(key="--resolution", parameters="0..100", default="5"))

    assert isinstance(as_range, IntegerRangeCapability)
    assert isinstance(as_lighting, SteppedRangeCapability)
    assert isinstance(as_resolution, SteplessNumericCapability)


def test_dispatch_enumerated():
    capability = normalize_capability(CapabilityEntry(key="--mode", parameters="Color|Gray", default="Gray"))

    assert isinstance(capability, EnumeratedCapability)


def test_unknown_key_passes_through_as_raw_text():
    entry = CapabilityEntry(key="--source", parameters="Flatbed|ADF", default="Flatbed")

    capability = normalize_capability(entry)

    assert isinstance(capability, RawCapability)
    assert capability.parameters == "Flatbed|ADF"
    assert capability.default == "Flatbed"
