"""Package builder: lays out a new datapack directory.

All settings are validated before anything is written. A failure while
writing can leave a partial tree behind; nothing is rolled back.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from mcpack import elements, pack_formats
from mcpack.config import MINECRAFT_NAMESPACE, MINECRAFT_TAGS_DIR, STARTER_FILES
from mcpack.errors import Outcome
from mcpack.models.manifest import FormatRange, PackManifest, SupportedFormats
from mcpack.persistence.json_io import write_json_file, write_text_file
from mcpack.persistence.pack_paths import PackPaths
from mcpack.prompts import Prompter
from mcpack.validation import (
    validate_element_types,
    validate_formats,
    validate_icon,
    validate_namespace,
)

logger = logging.getLogger(__name__)

MIN_RANGE_FORMATS = 3
"""Smallest contiguous selection written as {min_inclusive, max_inclusive}."""


@dataclass
class PackSettings:
    """Everything needed to create a pack.

    Invariants (after validate()):
        - pack_formats is non-empty, sorted, and only holds known formats
        - icon_path, when set, is an existing .png file
        - custom_namespace, when set, is non-empty
        - namespace_folders only holds catalog element names
    """
    directory: Path
    name: str
    description: str
    pack_formats: list[int]
    icon_path: Path | None = None
    include_minecraft_namespace: bool = False
    minecraft_tags: list[str] = field(default_factory=list)
    custom_namespace: str | None = None
    namespace_folders: list[str] = field(default_factory=list)

    def validate(self) -> "PackSettings":
        """Check and normalize every setting in place.

        Raises:
            InvalidFormatError, InvalidIconError, InvalidNamespaceError,
            InvalidElementTypeError: On the first invalid setting
        """
        self.pack_formats = validate_formats(self.pack_formats)
        if self.icon_path is not None:
            self.icon_path = validate_icon(self.icon_path)
        if self.custom_namespace is not None:
            self.custom_namespace = validate_namespace(self.custom_namespace)
        self.namespace_folders = validate_element_types(self.namespace_folders)
        return self


def encode_supported_formats(formats: list[int]) -> SupportedFormats | None:
    """Choose how the manifest records the chosen formats.

    - one format: the field is omitted (None)
    - the full run of known formats between min and max, at least three of
      them: a FormatRange
    - anything else: the sorted list of chosen formats

    Example:
        >>> encode_supported_formats([48, 61])
        [48, 61]
    """
    chosen = sorted(set(formats))
    if len(chosen) <= 1:
        return None
    in_range = pack_formats.formats_in_range(chosen[0], chosen[-1])
    if set(chosen) == set(in_range) and len(in_range) >= MIN_RANGE_FORMATS:
        return FormatRange(min_inclusive=chosen[0], max_inclusive=chosen[-1])
    return chosen


def build_manifest(settings: PackSettings) -> PackManifest:
    """Manifest for new pack; pack_format is the newest chosen format."""
    return PackManifest(
        pack_format=max(settings.pack_formats),
        description=settings.description,
        supported_formats=encode_supported_formats(settings.pack_formats),
    )


def _prepare_directory(directory: Path, *, force: bool, prompter: Prompter) -> Outcome:
    if not directory.exists():
        return Outcome.CREATED
    if not force and not prompter.ask_confirm(
        f"Folder {directory.name} already exists. Overwrite?", default=False
    ):
        logger.info("Keeping existing directory %s", directory)
        return Outcome.SKIPPED
    if directory.is_dir():
        shutil.rmtree(directory)
    else:
        directory.unlink()
    logger.debug("Removed existing %s", directory)
    return Outcome.OVERWRITTEN


def _write_minecraft_tags(paths: PackPaths, tags: list[str]) -> None:
    tags_dir = paths.namespace_dir(MINECRAFT_NAMESPACE) / MINECRAFT_TAGS_DIR
    tags_dir.mkdir(parents=True, exist_ok=True)
    for tag in tags:
        tag_name = tag.removesuffix(elements.extension_for("function"))
        write_json_file(tags_dir / f"{tag_name}.json", {"values": []})


def _write_namespace(paths: PackPaths, namespace: str, folders: list[str]) -> None:
    namespace_dir = paths.namespace_dir(namespace)
    namespace_dir.mkdir(parents=True, exist_ok=True)
    for folder in folders:
        folder_path = namespace_dir / elements.folder_for(folder)
        folder_path.mkdir(parents=True, exist_ok=True)
        starter = STARTER_FILES.get(folder)
        if starter is None:
            continue
        write_text_file(
            folder_path / f"{starter}{elements.extension_for(folder)}",
            elements.default_content_for(folder),
        )


def build_pack(settings: PackSettings, *, force: bool, prompter: Prompter) -> Outcome:
    """Create the datapack tree described by settings.

    Args:
        settings: Pack settings; validated here before any write
        force: Replace an existing target without asking
        prompter: Asked to confirm overwriting an existing target

    Returns:
        Outcome.SKIPPED if the user declined to overwrite, otherwise
        CREATED or OVERWRITTEN

    Raises:
        CliError: If a setting is invalid
        OSError: If the tree cannot be written
    """
    settings.validate()
    # Read before the target is cleared; the icon may live inside it.
    icon_bytes = settings.icon_path.read_bytes() if settings.icon_path is not None else None
    outcome = _prepare_directory(settings.directory, force=force, prompter=prompter)
    if outcome is Outcome.SKIPPED:
        return outcome

    paths = PackPaths(root=settings.directory)
    paths.root.mkdir(parents=True, exist_ok=True)

    if icon_bytes is not None:
        paths.icon.write_bytes(icon_bytes)

    write_json_file(paths.manifest, build_manifest(settings).to_dict())
    paths.data_dir.mkdir(exist_ok=True)

    if settings.include_minecraft_namespace:
        _write_minecraft_tags(paths, settings.minecraft_tags)
    if settings.custom_namespace is not None:
        _write_namespace(paths, settings.custom_namespace, settings.namespace_folders)

    logger.info("Created datapack %s at %s", settings.name, settings.directory)
    return outcome
