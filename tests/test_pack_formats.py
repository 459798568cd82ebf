import pytest

from mcpack import pack_formats


def test_versions_for_known_and_unknown_format():
    assert pack_formats.versions_for(48) == ("1.21", "1.21.1")
    assert pack_formats.versions_for(0) is None


def test_is_supported():
    assert pack_formats.is_supported(48)
    assert not pack_formats.is_supported(0)


def test_known_formats_ascending():
    assert pack_formats.known_formats() == [48, 57, 61]


def test_table_is_read_only():
    with pytest.raises(TypeError):
        pack_formats.PACK_FORMATS[99] = ("9.9",)  # type: ignore[index]


@pytest.mark.parametrize(
    "version, expected",
    [
        ("1.21", [1, 21, 0]),
        ("1.21.1", [1, 21, 1]),
        ("1", [1, 0, 0]),
        ("1.21-pre1", [1, 0, 0]),
        ("1.2\u00b2", [1, 0, 0]),
    ],
)
def test_parse_version(version, expected):
    assert pack_formats.parse_version(version) == expected


def test_formats_in_range():
    assert pack_formats.formats_in_range(48, 61) == [48, 57, 61]
    assert pack_formats.formats_in_range(49, 60) == [57]
    assert pack_formats.formats_in_range(62, 70) == []


def test_versions_for_formats_sorted_and_deduplicated():
    assert pack_formats.versions_for_formats([61, 48, 48]) == ["1.21", "1.21.1", "1.21.4"]
    assert pack_formats.versions_for_formats([0, 999]) == []


def test_collapse_consecutive_run():
    assert pack_formats.collapse_to_ranges(["1.21", "1.21.1", "1.21.2"]) == "1.21-1.21.2"


def test_collapse_with_gap():
    versions = ["1.21", "1.21.1", "1.21.2", "1.21.4"]
    assert pack_formats.collapse_to_ranges(versions) == "1.21-1.21.2, 1.21.4"


def test_collapse_empty_and_single():
    assert pack_formats.collapse_to_ranges([]) == ""
    assert pack_formats.collapse_to_ranges(["1.21.4"]) == "1.21.4"


def test_collapse_strips_trailing_zero_components():
    assert pack_formats.collapse_to_ranges(["1.21.0", "1.21.1"]) == "1.21-1.21.1"


def test_minor_bump_counts_as_consecutive():
    # The rightmost differing component decides, so 1.20.6 -> 1.21 is a gap
    # while 1.20 -> 1.21 is adjacent.
    assert pack_formats.collapse_to_ranges(["1.20", "1.21"]) == "1.20-1.21"
    assert pack_formats.collapse_to_ranges(["1.20.6", "1.21"]) == "1.20.6, 1.21"


def test_format_version_range():
    assert pack_formats.format_version_range([48, 57, 61]) == "1.21-1.21.4"
    assert pack_formats.format_version_range([48, 61]) == "1.21-1.21.1, 1.21.4"
    assert pack_formats.format_version_range([7]) == ""


def test_latest_version():
    assert pack_formats.latest_version(57) == "1.21.3"
    assert pack_formats.latest_version(1) is None


def test_describe_formats_lists_every_format():
    text = pack_formats.describe_formats()
    assert text.startswith("48 (1.21, 1.21.1)")
    assert "61 (1.21.4)" in text
