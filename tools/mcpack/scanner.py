"""Package scanner: builds a PackSummary from a pack directory or zip archive.

Classification rules, applied to each file under data/<namespace>/:
- ``.mcfunction`` files count as functions
- ``.json`` files count under the element type whose folder is the first
  segment after the namespace (advancement/, recipe/, tags/, ...)
- a ``worldgen`` first segment marks the namespace as altering world
  generation and is not counted
- everything else is skipped
"""

from __future__ import annotations

import logging
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from mcpack import elements
from mcpack.config import ARCHIVE_SUFFIX, WORLDGEN_SEGMENT
from mcpack.errors import ArchiveError, PathNotFoundError
from mcpack.models.manifest import PackManifest
from mcpack.models.summary import NamespaceCounts, PackSummary
from mcpack.persistence.json_io import parse_json_text
from mcpack.persistence.listers import ArchiveLister, DataEntry, DirectoryLister, PackLister

logger = logging.getLogger(__name__)

FUNCTION_EXTENSION = elements.extension_for("function")


def classify(entry: DataEntry) -> str | None:
    """Return the element type a data file counts as, or None to skip it."""
    if entry.suffix == FUNCTION_EXTENSION:
        return "function"
    if entry.suffix != ".json":
        return None
    element = elements.element_for_folder(entry.category)
    if element is None or element.extension != ".json":
        return None
    return element.name


def tally_namespaces(lister: PackLister) -> dict[str, NamespaceCounts]:
    """Count elements per namespace, dropping namespaces without content."""
    namespaces: dict[str, NamespaceCounts] = {}
    for entry in lister.entries():
        counts = namespaces.setdefault(entry.namespace, NamespaceCounts())
        if entry.category == WORLDGEN_SEGMENT:
            counts.world_gen = True
            continue
        element_type = classify(entry)
        if element_type is None:
            logger.debug("Skipping unrecognized file %s", entry.path)
            continue
        counts.add(element_type)
    return {name: counts for name, counts in namespaces.items() if counts.has_content}


def read_manifest(lister: PackLister) -> PackManifest:
    """Read and parse the manifest through a lister.

    Raises:
        ManifestNotFoundError: If the pack has no manifest
        InvalidJsonError: If the manifest is not valid JSON
        ManifestFieldError: If pack or pack_format is missing or invalid
    """
    source = f"pack.mcmeta in {lister.location}"
    return PackManifest.from_dict(parse_json_text(lister.read_manifest(), source), source)


def scan_package(lister: PackLister) -> PackSummary:
    """Inspect a pack and summarize its manifest and namespaces.

    The manifest is read first; any manifest error aborts the scan before
    the file tree is walked.
    """
    manifest = read_manifest(lister)
    summary = PackSummary(
        name=lister.name,
        description=manifest.description_text,
        pack_format=manifest.pack_format,
        supported_formats=manifest.expanded_formats(),
        namespaces=tally_namespaces(lister),
        features=list(manifest.features),
        block_patterns=list(manifest.block_patterns),
        overlays=list(manifest.overlays),
    )
    logger.info(
        "Scanned %s: %d namespace(s) with content", lister.location, len(summary.namespaces)
    )
    return summary


def resolve_target(target: Path) -> Path:
    """Resolve the path given to `info`.

    Directories are used as-is. Anything else is treated as an archive,
    appending ".zip" when the name lacks it.

    Raises:
        PathNotFoundError: If neither the directory nor the archive exists
    """
    if target.is_dir():
        return target
    if target.suffix != ARCHIVE_SUFFIX:
        target = target.with_name(f"{target.name}{ARCHIVE_SUFFIX}")
    if not target.is_file():
        raise PathNotFoundError(str(target), "Zip file")
    return target


@contextmanager
def open_lister(target: Path) -> Iterator[PackLister]:
    """Open a lister for a pack directory or archive.

    Raises:
        PathNotFoundError: If the target does not exist
        ArchiveError: If the archive cannot be opened
    """
    resolved = resolve_target(target)
    if resolved.is_dir():
        yield DirectoryLister(resolved)
        return
    try:
        archive = zipfile.ZipFile(resolved)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveError(str(resolved), str(exc)) from exc
    with archive:
        yield ArchiveLister(archive, resolved)


def inspect_path(target: Path) -> PackSummary:
    """Scan a pack directory or archive path."""
    with open_lister(target) as lister:
        return scan_package(lister)
