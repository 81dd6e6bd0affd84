"""CLI UI components (Rich).

Tables and panels live here so commands only decide *what* to show.
"""

from __future__ import annotations

import math
from collections import Counter

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    Capability,
    DeviceModel,
    EnumeratedCapability,
    IntegerRangeCapability,
    SteplessNumericCapability,
    SteppedRangeCapability,
)


def print_banner(console: Console, device: DeviceModel) -> None:
    """Device header: backend id, feature count and the version that built it."""

    kinds = Counter(capability.kind for capability in device.features.values())
    summary = ", ".join(f"{count} {kind}" for kind, count in sorted(kinds.items())) or "no options"
    body = Text.assemble(
        Text(device.id or "(unnamed device)", style="bold cyan"),
        "\n",
        Text(f"{len(device.features)} options: {summary}", style="dim"),
    )
    console.print(Panel(body, title="scandev", subtitle=f"v{device.version}", border_style="cyan", padding=(0, 2)))


def format_number(value: float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_capability(capability: Capability) -> str:
    """One-line summary of the selectable values."""

    if isinstance(capability, EnumeratedCapability):
        return " | ".join(capability.options)
    if isinstance(capability, SteplessNumericCapability):
        return ", ".join(format_number(v) for v in capability.options)
    if isinstance(capability, IntegerRangeCapability):
        low, high = capability.limits
        return f"{format_number(low)} .. {format_number(high)}"
    if isinstance(capability, SteppedRangeCapability):
        low, high = capability.limits
        return f"{format_number(low)} .. {format_number(high)} (step {capability.interval})"
    return capability.parameters


def build_features_table(device: DeviceModel) -> Table:
    table = Table(title=f"Device {device.id}", caption=f"version {device.version}")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta")
    table.add_column("Values", style="white")
    table.add_column("Default", style="green")

    for key, capability in device.features.items():
        default = capability.default
        table.add_row(
            key,
            capability.kind,
            describe_capability(capability),
            default if isinstance(default, str) else format_number(default),
        )
    return table
