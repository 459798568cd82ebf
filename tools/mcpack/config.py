"""Configuration constants for datapack scaffolding and inspection.

This module centralizes the file names, folder conventions and option lists
used across the CLI. Adding a new minecraft tag or starter folder requires
updating only this file.
"""

from __future__ import annotations

import re
from typing import Final, FrozenSet

# -----------------------------------------------------------------------------
# Pack Layout
# -----------------------------------------------------------------------------

MANIFEST_FILENAME: Final[str] = "pack.mcmeta"
"""Manifest file at the pack root."""

ICON_FILENAME: Final[str] = "pack.png"
"""Fixed name the pack icon is copied to."""

ICON_EXTENSION: Final[str] = ".png"

DATA_DIR: Final[str] = "data"
"""Resource subtree holding one folder per namespace."""

WORLDGEN_SEGMENT: Final[str] = "worldgen"
"""Category segment that marks world-generation content."""

MINECRAFT_NAMESPACE: Final[str] = "minecraft"

MINECRAFT_TAGS_DIR: Final[str] = "tags/function"
"""Function tag folder created inside the minecraft namespace."""

ARCHIVE_SUFFIX: Final[str] = ".zip"

MAX_PACK_FORMAT: Final[int] = 255
"""Largest format number accepted in supported_formats and overlay ranges."""


# -----------------------------------------------------------------------------
# Identifiers
# -----------------------------------------------------------------------------

NAMESPACE_REGEX: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9_.-]+$")
"""Characters the game accepts in a namespace. Other names are accepted with a warning."""


# -----------------------------------------------------------------------------
# Manifest Features
# -----------------------------------------------------------------------------

KNOWN_FEATURES: Final[FrozenSet[str]] = frozenset({
    "minecraft:redstone_experiments",
    "minecraft:minecart_improvements",
    "minecraft:trade_rebalance",
})
"""Experimental feature flags recognized in features.enabled."""


# -----------------------------------------------------------------------------
# Create Options
# -----------------------------------------------------------------------------

DEFAULT_PACK_NAME: Final[str] = "my-datapack"
DEFAULT_DESCRIPTION: Final[str] = "A newly created datapack"

MINECRAFT_TAG_OPTIONS: Final[tuple[str, ...]] = ("load", "tick")
"""Built-in function tags offered for the minecraft namespace."""

STARTER_FOLDER_OPTIONS: Final[tuple[str, ...]] = (
    "function",
    "advancement",
    "tag",
    "recipe",
    "loot_table",
    "predicate",
)
"""Element types offered as starter folders for a custom namespace."""

STARTER_FILES: Final[dict[str, str]] = {
    "function": "main",
    "advancement": "advancement",
    "recipe": "recipe",
    "loot_table": "loot_table",
    "predicate": "predicate",
}
"""Starter folders that also receive an example file (name without extension)."""
