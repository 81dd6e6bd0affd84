"""Capability normalizers.

One routine per capability class, each turning a raw `CapabilityEntry` into a
typed capability. Typical inputs from `scanimage -A`:

- mode:        `Lineart|Gray|Color [Color]`
- resolution:  `75|100|150|300|600|1200dpi [75]` or `75..1200dpi [150]`
- geometry:    `0..215.9mm [215.9]`
- lighting:    `-100..100% (in steps of 1) [0]`

None of these raise. Text that does not parse yields NaN or empty fields, so a
single odd capability never blocks the rest of the device.
"""

from __future__ import annotations

import math
import re

from core.domain.models import (
    CapabilityEntry,
    EnumeratedCapability,
    IntegerRangeCapability,
    SteplessNumericCapability,
    SteppedRangeCapability,
)
from core.services.numbers import extract_numbers, floor_number, to_number

REFERENCE_RESOLUTIONS: tuple[float, ...] = (50, 75, 100, 150, 200, 300, 600, 1200)

# Rung limit for ladders that never end on their own (low < 0 or high infinite).
MAX_LADDER_STEPS = 64

_LEADING_TOKEN = re.compile(r"\S*")
_STEP_HINT = re.compile(r"\(in steps of ([0-9]{1,2})\)")


def _range_pair(text: str) -> tuple[float, float]:
    numbers = extract_numbers(text, "..")
    low = numbers[0] if len(numbers) > 0 else math.nan
    high = numbers[1] if len(numbers) > 1 else math.nan
    return low, high


def halving_ladder(low: float, high: float) -> list[float]:
    """Values from `high` halved while still above `low`, plus `low`, ascending."""

    ladder: list[float] = []
    unbounded = low < 0 or math.isinf(high)
    value = high
    while value > low and not (unbounded and len(ladder) >= MAX_LADDER_STEPS):
        ladder.append(value)
        value /= 2
    ladder.append(low)
    ladder.sort()
    return ladder


def normalize_enumerated(entry: CapabilityEntry) -> EnumeratedCapability:
    return EnumeratedCapability(
        parameters=entry.parameters,
        options=tuple(entry.parameters.split("|")),
        default=entry.default,
    )


def normalize_stepless_numeric(entry: CapabilityEntry) -> SteplessNumericCapability:
    """Resolution-like capability.

    Order of precedence:
    1) `a|b|c` explicit list
    2) `low..high` range, rebuilt as a halving ladder down from `high`
    3) the reference resolutions
    """

    parameters = entry.parameters
    if "|" in parameters:
        options = extract_numbers(parameters, "|")
    elif ".." in parameters:
        low, high = _range_pair(parameters)
        options = halving_ladder(low, high)
    else:
        options = list(REFERENCE_RESOLUTIONS)

    return SteplessNumericCapability(
        parameters=parameters,
        options=tuple(options),
        default=to_number(entry.default),
    )


def normalize_integer_range(entry: CapabilityEntry) -> IntegerRangeCapability:
    # First number is taken as low, second as high; the listing is trusted.
    low, high = _range_pair(entry.parameters)
    return IntegerRangeCapability(
        parameters=entry.parameters,
        limits=(floor_number(low), floor_number(high)),
        default=floor_number(to_number(entry.default)),
    )


def normalize_stepped_range(entry: CapabilityEntry) -> SteppedRangeCapability:
    parameters = entry.parameters
    low, high = _range_pair(_LEADING_TOKEN.match(parameters).group(0))

    steps = _STEP_HINT.search(parameters)
    interval = int(steps.group(1)) if steps else 1

    return SteppedRangeCapability(
        parameters=parameters,
        limits=(low, high),
        interval=interval,
        default=to_number(entry.default),
    )
