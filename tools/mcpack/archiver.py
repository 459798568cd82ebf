"""Archiver: compresses a pack directory into a distributable zip.

Entries keep their path relative to the pack root, always with forward
slashes, and are deflate-compressed.
"""

from __future__ import annotations

import logging
import os
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from mcpack import pack_formats
from mcpack.config import ARCHIVE_SUFFIX
from mcpack.errors import ArchiveError, ManifestFieldError, Outcome
from mcpack.persistence.json_io import read_json_file
from mcpack.persistence.pack_paths import PackPaths, resolve_pack_root
from mcpack.prompts import Prompter
from mcpack.validation import validate_archive_name

logger = logging.getLogger(__name__)

ProgressObserver = Callable[[int, int], None]
"""Called with (files processed, total files) after each file is written."""


@dataclass(frozen=True, slots=True)
class ZipResult:
    """Archive location, outcome and number of files written."""
    path: Path
    outcome: Outcome
    files: int = 0


def _iter_files(source: Path, exclude: Path | None = None) -> Iterator[Path]:
    excluded = exclude.resolve() if exclude is not None else None
    for current, dirs, files in os.walk(source):
        dirs.sort()
        for filename in sorted(files):
            path = Path(current) / filename
            if excluded is not None and path.resolve() == excluded:
                logger.debug("Skipping archive output %s", path)
                continue
            yield path


def count_files(source: Path, exclude: Path | None = None) -> int:
    """Count the files below a directory, recursively."""
    return sum(1 for _ in _iter_files(source, exclude))


def archive_directory(
    source: Path,
    destination: Path,
    *,
    progress: ProgressObserver | None = None,
) -> int:
    """Write every file under source into a deflate zip at destination.

    The destination is excluded when it lies inside source.

    Args:
        source: Directory to compress
        destination: Archive path (replaced if it exists)
        progress: Optional observer notified after each file

    Returns:
        Number of files written

    Raises:
        ArchiveError: If the archive cannot be written
    """
    total = count_files(source, exclude=destination)
    processed = 0
    try:
        with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path in _iter_files(source, exclude=destination):
                arcname = path.relative_to(source).as_posix()
                archive.write(path, arcname)
                processed += 1
                logger.debug("Added %s", arcname)
                if progress is not None:
                    progress(processed, total)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ArchiveError(str(destination), str(exc)) from exc
    return processed


def read_pack_format(paths: PackPaths) -> int:
    """Read pack.pack_format from a pack directory's manifest.

    Numeric strings are accepted.

    Raises:
        InvalidJsonError: If the manifest is not valid JSON
        ManifestFieldError: If pack_format is missing or not a number
    """
    source = str(paths.manifest)
    data = read_json_file(paths.manifest)
    pack = data.get("pack") if isinstance(data, dict) else None
    value = pack.get("pack_format") if isinstance(pack, dict) else None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ManifestFieldError(source, "pack.pack_format", "missing or invalid 'pack_format'")


def default_archive_name(source: Path, pack_format: int) -> str:
    """Name an archive after the pack folder and its newest game version.

    Example:
        >>> default_archive_name(Path("my-pack"), 61)
        'my-pack_1.21.4.zip'
    """
    version = pack_formats.latest_version(pack_format)
    suffix = f"_{version}" if version else ""
    return f"{source.resolve().name}{suffix}{ARCHIVE_SUFFIX}"


def zip_pack(
    source: Path,
    output_dir: Path,
    *,
    name: str | None = None,
    force: bool,
    prompter: Prompter,
    progress: ProgressObserver | None = None,
) -> ZipResult:
    """Compress a pack directory.

    Args:
        source: Pack directory (must hold pack.mcmeta)
        output_dir: Directory the archive is written to
        name: Custom archive name ending with .zip; derived when None
        force: Overwrite an existing archive without asking
        prompter: Asked to confirm overwriting an existing archive
        progress: Optional observer notified after each file

    Returns:
        ZipResult; outcome is SKIPPED when the user declined to overwrite

    Raises:
        ManifestNotFoundError: If source is not a pack
        InvalidNameError: If name does not end with .zip
        ArchiveError: If the archive cannot be written
    """
    paths = resolve_pack_root(source)
    pack_format = read_pack_format(paths)
    if not pack_formats.is_supported(pack_format):
        logger.warning("pack_format %d is not a known format", pack_format)
    archive_name = validate_archive_name(name) if name else default_archive_name(source, pack_format)
    destination = output_dir / archive_name

    outcome = Outcome.CREATED
    if destination.exists():
        if not force and not prompter.ask_confirm(
            f"File {archive_name} already exists. Overwrite?", default=False
        ):
            logger.info("Keeping existing archive %s", destination)
            return ZipResult(path=destination, outcome=Outcome.SKIPPED)
        outcome = Outcome.OVERWRITTEN

    output_dir.mkdir(parents=True, exist_ok=True)
    files = archive_directory(paths.root, destination, progress=progress)
    logger.info("Archived %d file(s) from %s into %s", files, source, destination)
    return ZipResult(path=destination, outcome=outcome, files=files)
