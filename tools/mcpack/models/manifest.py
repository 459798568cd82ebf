"""Domain model for the pack.mcmeta manifest.

The manifest is written once by ``create`` and read back by ``info`` and
``zip``. Reading is lenient for optional sections (unrecognized shapes
degrade to defaults) and strict for the required ``pack.pack_format``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mcpack.config import KNOWN_FEATURES, MANIFEST_FILENAME, MAX_PACK_FORMAT
from mcpack.errors import ManifestFieldError

INVALID_DESCRIPTION = "Invalid description"


@dataclass(frozen=True, slots=True)
class FormatRange:
    """Inclusive range of pack formats ({min_inclusive, max_inclusive}).

    Invariants:
        - min_inclusive <= max_inclusive when written by the builder
    """
    min_inclusive: int
    max_inclusive: int

    def expand(self) -> list[int]:
        """Every integer in the range, ascending."""
        return list(range(self.min_inclusive, self.max_inclusive + 1))

    def to_dict(self) -> dict[str, int]:
        return {"min_inclusive": self.min_inclusive, "max_inclusive": self.max_inclusive}


SupportedFormats = list[int] | FormatRange


@dataclass(frozen=True, slots=True)
class Feature:
    """An entry of features.enabled and whether it is a known feature flag."""
    name: str
    known: bool


@dataclass(frozen=True, slots=True)
class BlockPattern:
    """A filter.block descriptor; either field may be absent."""
    namespace: str | None = None
    path: str | None = None

    def describe(self) -> str:
        parts = []
        if self.namespace is not None:
            parts.append(f"namespace: {self.namespace}")
        if self.path is not None:
            parts.append(f"path: {self.path}")
        return ", ".join(parts)


@dataclass(frozen=True, slots=True)
class Overlay:
    """An overlays.entries item: a directory applied for some formats."""
    formats: tuple[int, ...]
    directory: str


@dataclass
class PackManifest:
    """Contents of pack.mcmeta.

    Invariants:
        - pack_format is a non-negative integer
        - when built by the builder, pack_format == max(supported formats)

    The raw description is kept as found (string, text component or list of
    components) so it round-trips; use description_text for display.
    """
    pack_format: int
    description: Any = ""
    supported_formats: SupportedFormats | None = None
    features: list[Feature] = field(default_factory=list)
    block_patterns: list[BlockPattern] = field(default_factory=list)
    overlays: list[Overlay] = field(default_factory=list)

    @property
    def description_text(self) -> str:
        return parse_description(self.description)

    def expanded_formats(self) -> list[int]:
        """Supported formats as a flat list ([pack_format] when absent)."""
        return parse_supported_formats(self.pack_format, self.supported_formats)

    @classmethod
    def from_dict(cls, data: Any, source: str = MANIFEST_FILENAME) -> "PackManifest":
        """Create a PackManifest from parsed manifest JSON.

        Args:
            data: Parsed JSON document
            source: Manifest location used in error messages

        Returns:
            PackManifest instance

        Raises:
            ManifestFieldError: If the pack object or pack_format is missing or invalid
        """
        if not isinstance(data, dict):
            raise ManifestFieldError(source, "", "root must be an object")
        pack = data.get("pack")
        if not isinstance(pack, dict):
            raise ManifestFieldError(source, "pack", "missing 'pack' object")
        if "pack_format" not in pack:
            raise ManifestFieldError(source, "pack.pack_format", "missing 'pack_format'")
        pack_format = pack["pack_format"]
        if isinstance(pack_format, bool) or not isinstance(pack_format, int) or pack_format < 0:
            raise ManifestFieldError(
                source, "pack.pack_format", f"invalid 'pack_format' value {pack_format!r}"
            )

        return cls(
            pack_format=pack_format,
            description=pack.get("description", ""),
            supported_formats=_read_supported_formats(pack.get("supported_formats")),
            features=parse_features(data),
            block_patterns=parse_filter(data),
            overlays=parse_overlays(data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the pack.mcmeta JSON structure.

        supported_formats is omitted when absent; the optional top-level
        sections are only written when they hold entries.
        """
        pack: dict[str, Any] = {
            "description": self.description,
            "pack_format": self.pack_format,
        }
        if isinstance(self.supported_formats, FormatRange):
            pack["supported_formats"] = self.supported_formats.to_dict()
        elif self.supported_formats is not None:
            pack["supported_formats"] = list(self.supported_formats)

        result: dict[str, Any] = {"pack": pack}
        if self.features:
            result["features"] = {"enabled": [feature.name for feature in self.features]}
        if self.block_patterns:
            result["filter"] = {
                "block": [
                    {
                        key: value
                        for key, value in (("namespace", p.namespace), ("path", p.path))
                        if value is not None
                    }
                    for p in self.block_patterns
                ]
            }
        if self.overlays:
            result["overlays"] = {
                "entries": [
                    {"formats": list(o.formats), "directory": o.directory} for o in self.overlays
                ]
            }
        return result


# -----------------------------------------------------------------------------
# Description
# -----------------------------------------------------------------------------

def _component_text(component: Any) -> str:
    if isinstance(component, str):
        return component
    if isinstance(component, dict):
        text = component.get("text")
        if not isinstance(text, str):
            return ""
        extra = component.get("extra")
        if isinstance(extra, list):
            text += "".join(_component_text(child) for child in extra)
        return text
    return ""


def parse_description(description: Any) -> str:
    """Flatten a manifest description into plain text.

    Accepts a plain string, a text component object ({"text": ..., "color":
    ..., "extra": [...]}) or an array of components concatenated in order.
    Components without text contribute nothing; any other shape yields
    "Invalid description".
    """
    if isinstance(description, str):
        return description
    if isinstance(description, list):
        return "".join(_component_text(component) for component in description)
    if isinstance(description, dict):
        return _component_text(description)
    return INVALID_DESCRIPTION


# -----------------------------------------------------------------------------
# Supported Formats
# -----------------------------------------------------------------------------

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_format(value: Any) -> bool:
    return _is_int(value) and 0 <= value <= MAX_PACK_FORMAT


def _read_supported_formats(raw: Any) -> SupportedFormats | None:
    # Values outside 0..MAX_PACK_FORMAT are dropped; a range with an
    # out-of-bounds end is ignored as a whole.
    if isinstance(raw, FormatRange):
        raw = raw.to_dict()
    if isinstance(raw, list):
        formats = [value for value in raw if _is_format(value)]
        return formats or None
    if _is_format(raw):
        return [raw]
    if isinstance(raw, dict):
        minimum = raw.get("min_inclusive")
        maximum = raw.get("max_inclusive")
        if _is_format(minimum) and _is_format(maximum):
            return FormatRange(minimum, maximum)
    return None


def parse_supported_formats(pack_format: int, raw: Any) -> list[int]:
    """Expand a supported_formats value into a flat list of formats.

    Args:
        pack_format: The manifest's pack_format, used when raw is absent
        raw: Array of integers, single integer, {min_inclusive, max_inclusive}
            or an already parsed value

    Returns:
        List of formats; [pack_format] when raw is absent, unrecognized
        or out of bounds

    Example:
        >>> parse_supported_formats(61, {"min_inclusive": 48, "max_inclusive": 50})
        [48, 49, 50]
    """
    value = _read_supported_formats(raw)
    if value is None:
        return [pack_format]
    if isinstance(value, FormatRange):
        return value.expand() or [pack_format]
    return value


# -----------------------------------------------------------------------------
# Optional Sections
# -----------------------------------------------------------------------------

def parse_features(data: dict[str, Any]) -> list[Feature]:
    """Read features.enabled, flagging each entry as known or unknown."""
    features = data.get("features")
    enabled = features.get("enabled") if isinstance(features, dict) else None
    if not isinstance(enabled, list):
        return []
    return [
        Feature(name=name, known=name in KNOWN_FEATURES)
        for name in enabled
        if isinstance(name, str)
    ]


def parse_filter(data: dict[str, Any]) -> list[BlockPattern]:
    """Read filter.block patterns; non-object entries are ignored."""
    filter_section = data.get("filter")
    block = filter_section.get("block") if isinstance(filter_section, dict) else None
    if not isinstance(block, list):
        return []
    patterns = []
    for entry in block:
        if not isinstance(entry, dict):
            continue
        namespace = entry.get("namespace")
        path = entry.get("path")
        patterns.append(BlockPattern(
            namespace=namespace if isinstance(namespace, str) else None,
            path=path if isinstance(path, str) else None,
        ))
    return patterns


def parse_overlays(data: dict[str, Any]) -> list[Overlay]:
    """Read overlays.entries; entries without formats or directory are dropped."""
    overlays_section = data.get("overlays")
    entries = overlays_section.get("entries") if isinstance(overlays_section, dict) else None
    if not isinstance(entries, list):
        return []
    overlays = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        formats = _read_supported_formats(entry.get("formats"))
        if isinstance(formats, FormatRange):
            formats = formats.expand()
        directory = entry.get("directory")
        if formats and isinstance(directory, str) and directory:
            overlays.append(Overlay(formats=tuple(formats), directory=directory))
    return overlays
