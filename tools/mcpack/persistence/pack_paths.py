"""Datapack path resolution.

This module locates the well-known files of a pack directory and computes
where namespace content lives.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mcpack.config import DATA_DIR, ICON_FILENAME, MANIFEST_FILENAME
from mcpack.errors import ManifestNotFoundError, PathNotFoundError


@dataclass(frozen=True, slots=True)
class PackPaths:
    """Resolved paths of a datapack directory.

    Invariants:
        - root is a directory
        - manifest is root / pack.mcmeta (exists when produced by resolve_pack_root)
    """
    root: Path

    @property
    def manifest(self) -> Path:
        return self.root / MANIFEST_FILENAME

    @property
    def icon(self) -> Path:
        return self.root / ICON_FILENAME

    @property
    def data_dir(self) -> Path:
        return self.root / DATA_DIR

    def namespace_dir(self, namespace: str) -> Path:
        return self.data_dir / namespace

    def list_namespaces(self) -> list[str]:
        """Names of the namespace folders under data/, sorted."""
        if not self.data_dir.is_dir():
            return []
        return sorted(entry.name for entry in self.data_dir.iterdir() if entry.is_dir())


def resolve_pack_root(root: Path) -> PackPaths:
    """Resolve an existing pack directory.

    Args:
        root: Directory expected to hold pack.mcmeta

    Returns:
        PackPaths for the directory

    Raises:
        PathNotFoundError: If root is not a directory
        ManifestNotFoundError: If root has no pack.mcmeta
    """
    if not root.is_dir():
        raise PathNotFoundError(str(root), "Directory")
    paths = PackPaths(root=root)
    if not paths.manifest.is_file():
        raise ManifestNotFoundError(str(root))
    return paths
