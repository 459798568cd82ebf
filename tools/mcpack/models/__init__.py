"""Domain models for datapacks.

This module exports all domain model types for use across the CLI:
- Manifest (pack.mcmeta) and its optional sections
- Scanner summary types
- Common types (Namespace)
"""

from mcpack.models.common import Namespace, is_standard_namespace
from mcpack.models.manifest import (
    BlockPattern,
    Feature,
    FormatRange,
    Overlay,
    PackManifest,
    parse_description,
    parse_supported_formats,
)
from mcpack.models.summary import NamespaceCounts, PackSummary

__all__ = [
    # Common
    "Namespace",
    "is_standard_namespace",
    # Manifest
    "PackManifest",
    "FormatRange",
    "Feature",
    "BlockPattern",
    "Overlay",
    "parse_description",
    "parse_supported_formats",
    # Summary
    "NamespaceCounts",
    "PackSummary",
]
