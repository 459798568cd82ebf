"""File listers: one view of a pack's files for directories and zip archives.

The scanner only talks to a PackLister, so a pack directory and an archive
built from it are read through the same code path and yield the same
entries.
"""

from __future__ import annotations

import abc
import logging
import os
import zipfile
import zlib
from pathlib import Path, PurePosixPath
from typing import Iterator, NamedTuple

from mcpack.config import DATA_DIR, MANIFEST_FILENAME
from mcpack.errors import ArchiveError, InvalidJsonError, ManifestNotFoundError

logger = logging.getLogger(__name__)


class DataEntry(NamedTuple):
    """A file under data/, split into its namespace and category segment.

    path is relative to data/ and forward-slash separated. category is the
    first segment after the namespace, or "" for files at the namespace root.
    """
    path: str
    namespace: str
    category: str

    @property
    def suffix(self) -> str:
        return PurePosixPath(self.path).suffix


class PackLister(abc.ABC):
    """Abstract view of the files of a datapack."""

    #: Human-readable location used in messages
    location: str = ""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Pack name shown by `info`."""

    @abc.abstractmethod
    def read_manifest(self) -> str:
        """Return the manifest text.

        Raises:
            ManifestNotFoundError: If the pack has no manifest
        """

    @abc.abstractmethod
    def iter_data_paths(self) -> Iterator[str]:
        """Yield forward-slash paths of every file below data/, relative to it."""

    def entries(self) -> Iterator[DataEntry]:
        """Yield a DataEntry for every file inside a namespace folder.

        Files directly in data/ belong to no namespace and are skipped.
        """
        for relative in self.iter_data_paths():
            parts = relative.split("/")
            if len(parts) < 2 or not parts[0]:
                continue
            category = parts[1] if len(parts) > 2 else ""
            yield DataEntry(path=relative, namespace=parts[0], category=category)


class DirectoryLister(PackLister):
    """Lists the files of a pack directory on disk."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.location = str(root)

    @property
    def name(self) -> str:
        return self.root.resolve().name

    def read_manifest(self) -> str:
        manifest = self.root / MANIFEST_FILENAME
        if not manifest.is_file():
            raise ManifestNotFoundError(self.location)
        try:
            return manifest.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidJsonError(str(manifest), str(exc)) from exc

    def iter_data_paths(self) -> Iterator[str]:
        data_dir = self.root / DATA_DIR
        if not data_dir.is_dir():
            logger.debug("No %s directory in %s", DATA_DIR, self.location)
            return
        for current, dirs, files in os.walk(data_dir):
            dirs.sort()
            for filename in sorted(files):
                yield (Path(current) / filename).relative_to(data_dir).as_posix()


class ArchiveLister(PackLister):
    """Lists the files of a zipped pack.

    The first entry named pack.mcmeta (at the root or in any folder) marks
    the pack root inside the archive; data/ is resolved relative to it.
    """

    def __init__(self, archive: zipfile.ZipFile, path: Path) -> None:
        self.archive = archive
        self.path = path
        self.location = str(path)
        self._manifest_entry = self._find_manifest_entry()

    @property
    def name(self) -> str:
        return self.path.stem

    def _find_manifest_entry(self) -> str | None:
        for entry in self.archive.namelist():
            if entry == MANIFEST_FILENAME or entry.endswith(f"/{MANIFEST_FILENAME}"):
                return entry
        return None

    @property
    def root_prefix(self) -> str:
        """Archive path of the pack root, "" or ending with "/"."""
        if self._manifest_entry is None:
            return ""
        return self._manifest_entry[: -len(MANIFEST_FILENAME)]

    def read_manifest(self) -> str:
        if self._manifest_entry is None:
            raise ManifestNotFoundError(self.location)
        # RuntimeError: encrypted entry; NotImplementedError: unsupported compression
        try:
            raw = self.archive.read(self._manifest_entry)
        except (zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError, OSError) as exc:
            raise ArchiveError(self.location, str(exc)) from exc
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidJsonError(f"{self.location}:{self._manifest_entry}", str(exc)) from exc

    def iter_data_paths(self) -> Iterator[str]:
        data_prefix = f"{self.root_prefix}{DATA_DIR}/"
        for entry in self.archive.namelist():
            if entry.startswith(data_prefix) and not entry.endswith("/"):
                yield entry[len(data_prefix):]
