"""Shared pytest configuration and fixtures for the scandev test suite."""

import json
import sys
from pathlib import Path

import pytest

# Ensure src/ is importable without an editable install
SRC_ROOT = Path(__file__).parent.parent / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


EPSON_LISTING = """\
Usage: scanimage [OPTION]...

All options specific to device `epson2:libusb:001:004':
  Scan Mode:
    --mode Lineart|Gray|Color [Lineart]
        Selects the scan mode (e.g., lineart, monochrome, or color).
    --depth 8|16 [inactive]
        Number of bits per sample, typical values are 1 for "line-art" and 8
        for multibit scans.
    --halftoning None|Halftone A (Hard Tone)|Halftone B (Soft Tone) [inactive]
        Selects the halftone.
    --brightness -4..3 [0]
        Selects the brightness.
    --resolution 75|100|150|300|600|1200dpi [75]
        Sets the resolution of the scanned image.
    --source Flatbed [Flatbed]
        Selects the scan source (such as a document-feeder).
    --preview[=(yes|no)] [no]
        Request a preview-quality scan.
  Geometry:
    -l 0..215.9mm [0]
        Top-left x position of scan area.
    -t 0..297.18mm [0]
        Top-left y position of scan area.
    -x 0..215.9mm [215.9]
        Width of scan-area.
    -y 0..297.18mm [297.18]
        Height of scan-area.
  Enhancement:
    --contrast -100..100% (in steps of 1) [inactive]
        Controls the contrast of the acquired image.
"""

EPSON_ACTIVE_KEYS = [
    "--mode",
    "--brightness",
    "--resolution",
    "--source",
    "--preview",
    "-l",
    "-t",
    "-x",
    "-y",
]


class FakeRunner:
    """`CommandRunner` returning canned output and recording every call."""

    def __init__(self, output: str = EPSON_LISTING, error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: list[str] = []

    async def execute(self, command_line: str) -> str:
        self.calls.append(command_line)
        if self.error is not None:
            raise self.error
        return self.output


class MemoryStore:
    """`StructuredFileStore` kept in memory."""

    def __init__(self, content: str | None = None) -> None:
        self.content = content
        self.saves: list[str] = []
        self.deletes = 0

    def exists(self) -> bool:
        return self.content is not None

    def read_as_structured(self):
        return json.loads(self.content)

    def save(self, serialized: str) -> None:
        self.saves.append(serialized)
        self.content = serialized

    def delete(self) -> None:
        self.deletes += 1
        self.content = None


@pytest.fixture
def epson_listing() -> str:
    return EPSON_LISTING


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep AppSettings away from the developer's own config and cache."""

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("SCANDEV_CACHE_PATH", str(tmp_path / "cache" / "devices.json"))
    for name in ("SCANDEV_SCANIMAGE", "SCANDEV_LISTING_ARGS", "SCANDEV_COMMAND_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
