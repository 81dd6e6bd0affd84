import pytest

from conftest import EPSON_ACTIVE_KEYS
from core.domain.errors import EmptyInputError, NoDeviceIdentifierError
from core.services.listing_parser import find_device_id, parse_listing, scan_capability_line

BANNER = "All options specific to device `pixma:04A91912':\n"


def test_parse_listing_extracts_device_id(epson_listing):
    parsed = parse_listing(epson_listing)

    assert parsed.id == "epson2:libusb:001:004"


def test_parse_listing_skips_inactive_capabilities(epson_listing):
    parsed = parse_listing(epson_listing)

    assert list(parsed.entries) == EPSON_ACTIVE_KEYS
    assert "--depth" not in parsed.entries
    assert "--contrast" not in parsed.entries


def test_parse_listing_records_parameters_and_default(epson_listing):
    entries = parse_listing(epson_listing).entries

    assert entries["--mode"].parameters == "Lineart|Gray|Color"
    assert entries["--mode"].default == "Lineart"
    assert entries["-x"].parameters == "0..215.9mm"
    assert entries["-x"].default == "215.9"


def test_parse_listing_handles_brackets_inside_parameters(epson_listing):
    preview = parse_listing(epson_listing).entries["--preview"]

    assert preview.parameters == "[=(yes|no)]"
    assert preview.default == "no"


@pytest.mark.parametrize("text", ["", None])
def test_parse_listing_rejects_empty_input(text):
    with pytest.raises(EmptyInputError):
        parse_listing(text)


def test_missing_banner_fails_even_with_valid_capabilities():
    text = "  --mode Color|Gray [Color]\n    -l 0..215mm [0]\n"

    with pytest.raises(NoDeviceIdentifierError):
        parse_listing(text)


def test_banner_only_listing_has_no_entries():
    parsed = parse_listing(BANNER)

    assert parsed.id == "pixma:04A91912"
    assert parsed.entries == {}


def test_duplicate_key_keeps_last_occurrence():
    text = BANNER + "    --mode Color [Color]\n    --mode Gray|Color [Gray]\n"

    entry = parse_listing(text).entries["--mode"]

    assert entry.parameters == "Gray|Color"
    assert entry.default == "Gray"


def test_unterminated_last_line_is_ignored():
    text = BANNER + "    --mode Color|Gray [Color]\n    -l 0..215mm [0]"

    assert list(parse_listing(text).entries) == ["--mode"]


def test_carriage_returns_are_tolerated():
    text = BANNER.replace("\n", "\r\n") + "    --mode Color|Gray [Color]\r\n"

    parsed = parse_listing(text)

    assert parsed.id == "pixma:04A91912"
    assert parsed.entries["--mode"].default == "Color"


def test_n_active_and_m_inactive_lines_give_n_entries():
    active = [f"    --opt-{i} 0..{i}mm [0]\n" for i in range(5)]
    inactive = [f"    --off-{i} 0..{i}mm [inactive]\n" for i in range(3)]

    parsed = parse_listing(BANNER + "".join(active + inactive))

    assert len(parsed.entries) == 5
    assert not any(key.startswith("--off-") for key in parsed.entries)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("    -l 0..215.9mm [0]", ("-l", "0..215.9mm", "0")),
        ("    --lamp-off-scan [no]", ("--lamp-off-scan", "", "no")),
        ("\t--mode Color [Color]", ("--mode", "Color", "Color")),
        ("  --source Flatbed|Automatic Document Feeder [Flatbed]",
         ("--source", "Flatbed|Automatic Document Feeder", "Flatbed")),
    ],
)
def test_scan_capability_line_splits_three_parts(line, expected):
    entry = scan_capability_line(line)

    assert (entry.key, entry.parameters, entry.default) == expected


@pytest.mark.parametrize(
    "line",
    [
        "--mode Color [Color]",  # no leading whitespace
        "    Selects the scan mode [see manual]",
        "    --mode Color|Gray",
        "    - [x]",
        "",
    ],
)
def test_scan_capability_line_rejects_non_capability_lines(line):
    assert scan_capability_line(line) is None


def test_find_device_id_returns_none_without_banner():
    assert find_device_id("Usage: scanimage [OPTION]...\n") is None
