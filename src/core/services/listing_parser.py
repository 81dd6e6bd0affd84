"""Line-oriented scanner for `scanimage -A` output.

Shape of the listing (abridged):

    All options specific to device `epson2:libusb:001:004':
      Scan Mode:
        --mode Lineart|Gray|Color [Lineart]
            Selects the scan mode (e.g., lineart, monochrome, or color).
        --depth 8|16 [inactive]
      Geometry:
        -l 0..215.9mm [0]

A capability line is: leading whitespace, a key token (`-` followed by
hyphen/alphanumeric characters), an optional space, free-text parameters and a
bracketed default closing the line. Description lines never start with `-`
and are ignored.
"""

from __future__ import annotations

import logging

from core.domain.errors import EmptyInputError, NoDeviceIdentifierError
from core.domain.models import CapabilityEntry, ParsedListing

logger = logging.getLogger(__name__)

BANNER_LEAD_IN = "All options specific to device `"
BANNER_CLOSE = "'"
INACTIVE = "inactive"


def _is_key_char(char: str) -> bool:
    return char == "-" or (char.isascii() and char.isalnum())


def find_device_id(text: str) -> str | None:
    """Backend name from the first banner line, or `None` when there is none."""

    for line in text.splitlines():
        start = line.find(BANNER_LEAD_IN)
        if start < 0:
            continue
        rest = line[start + len(BANNER_LEAD_IN):]
        end = rest.rfind(BANNER_CLOSE)
        if end < 0:
            continue
        return rest[:end]
    return None


def scan_capability_line(line: str) -> CapabilityEntry | None:
    """Split one listing line into key / parameters / default.

    Returns `None` when the line is not a capability line. `inactive` lines are
    still returned here; filtering is the caller's decision.
    """

    line = line.removesuffix("\r")
    body = line.lstrip()
    if body == line or not body.startswith("-"):
        return None

    end = 0
    while end < len(body) and _is_key_char(body[end]):
        end += 1
    key = body[:end]
    if len(key) < 2:
        return None

    rest = body[end:]
    if not rest.endswith("]"):
        return None
    bracket = rest.rfind(" [")
    if bracket < 0:
        return None

    default = rest[bracket + 2:-1]
    parameters = rest[:bracket]
    if parameters.startswith(" "):
        parameters = parameters[1:]

    return CapabilityEntry(key=key, parameters=parameters, default=default)


def parse_listing(text: str | None) -> ParsedListing:
    """Parse the full listing into a `ParsedListing`.

    Raises:
    - `EmptyInputError` for `None` or empty text.
    - `NoDeviceIdentifierError` when no banner names the device, whatever the
      capability lines look like.
    """

    if text is None or text == "":
        raise EmptyInputError()

    device_id = find_device_id(text)
    if device_id is None:
        raise NoDeviceIdentifierError()

    entries: dict[str, CapabilityEntry] = {}
    # Only newline-terminated lines count; the final fragment is dropped.
    for line in text.split("\n")[:-1]:
        entry = scan_capability_line(line)
        if entry is None:
            continue
        if entry.default == INACTIVE:
            logger.debug("Skipping inactive capability %s", entry.key)
            continue
        entries[entry.key] = entry

    logger.debug("Parsed %d capabilities for device %s", len(entries), device_id)
    return ParsedListing(id=device_id, entries=entries)
