"""Pack format table and version-range formatting.

Each data pack format number covers one or more game versions. Release
numbers are sparse, so the formatter collapses a sorted version list into a
short human range such as "1.21-1.21.2, 1.21.4".
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Iterable, Mapping

# -----------------------------------------------------------------------------
# Format Table
# -----------------------------------------------------------------------------

PACK_FORMATS: Final[Mapping[int, tuple[str, ...]]] = MappingProxyType({
    48: ("1.21", "1.21.1"),
    57: ("1.21.2", "1.21.3"),
    61: ("1.21.4",),
})
"""Known pack formats in ascending order, each mapped to its versions in release order."""

VERSION_PARTS: Final[int] = 3
"""Versions are padded with zero components to at least this many parts."""


def known_formats() -> list[int]:
    """All known format numbers, ascending."""
    return sorted(PACK_FORMATS)


def versions_for(pack_format: int) -> tuple[str, ...] | None:
    """Return the game versions for a format number, or None if unknown."""
    return PACK_FORMATS.get(pack_format)


def is_supported(pack_format: int) -> bool:
    """Check if a format number is in the table."""
    return pack_format in PACK_FORMATS


def latest_version(pack_format: int) -> str | None:
    """Return the newest game version for a format number, or None if unknown."""
    versions = versions_for(pack_format)
    return versions[-1] if versions else None


def formats_in_range(minimum: int, maximum: int) -> list[int]:
    """Return every known format within [minimum, maximum], ascending.

    Example:
        >>> formats_in_range(48, 61)
        [48, 57, 61]
    """
    return [number for number in known_formats() if minimum <= number <= maximum]


def describe_formats() -> str:
    """Render the table as "48 (1.21, 1.21.1), 57 (...)" for error messages."""
    return ", ".join(
        f"{number} ({', '.join(PACK_FORMATS[number])})" for number in known_formats()
    )


# -----------------------------------------------------------------------------
# Version Ranges
# -----------------------------------------------------------------------------

def parse_version(version: str) -> list[int]:
    """Split a version string into integer parts padded to three components.

    Non-numeric components count as zero.

    Example:
        >>> parse_version("1.21")
        [1, 21, 0]
    """
    parts = [int(part) if part.isdecimal() else 0 for part in version.split(".")]
    while len(parts) < VERSION_PARTS:
        parts.append(0)
    return parts


def versions_for_formats(formats: Iterable[int]) -> list[str]:
    """Collect the versions of all known formats, sorted and deduplicated.

    Unknown formats contribute nothing.
    """
    versions: set[str] = set()
    for pack_format in formats:
        versions.update(versions_for(pack_format) or ())
    return sorted(versions, key=parse_version)


def _is_consecutive(previous: str, current: str) -> bool:
    # Walk from the least significant component; the first difference decides.
    pairs = list(zip(parse_version(previous), parse_version(current)))
    for before, after in reversed(pairs):
        if before != after:
            return after - before == 1
    return False


def _strip_zero_suffix(version: str) -> str:
    while version.endswith(".0"):
        version = version[:-2]
    return version


def _render_group(start: str, end: str) -> str:
    if start == end:
        return _strip_zero_suffix(start)
    return f"{_strip_zero_suffix(start)}-{_strip_zero_suffix(end)}"


def collapse_to_ranges(versions: list[str]) -> str:
    """Collapse a sorted, deduplicated version list into ranges.

    Consecutive versions are grouped into "start-end" spans, single versions
    stand alone, and groups are joined with ", ". Two versions are
    consecutive when their rightmost differing component increases by one.

    Args:
        versions: Versions in ascending order without duplicates

    Returns:
        Range text, or "" for an empty list

    Example:
        >>> collapse_to_ranges(["1.21", "1.21.1", "1.21.2", "1.21.4"])
        '1.21-1.21.2, 1.21.4'
    """
    if not versions:
        return ""

    groups: list[str] = []
    start = previous = versions[0]
    for version in versions[1:]:
        if not _is_consecutive(previous, version):
            groups.append(_render_group(start, previous))
            start = version
        previous = version
    groups.append(_render_group(start, previous))

    return ", ".join(groups)


def format_version_range(formats: Iterable[int]) -> str:
    """Render the game versions covered by a set of formats as ranges."""
    return collapse_to_ranges(versions_for_formats(formats))
