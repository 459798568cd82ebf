"""Persistence layer for datapacks.

This module exports file I/O components:
- JSON parsing and atomic writes
- PackPaths resolution
- File listers over directories and zip archives
"""

from mcpack.persistence.json_io import (
    parse_json_text,
    read_json_file,
    write_json_file,
    write_text_file,
)
from mcpack.persistence.listers import ArchiveLister, DataEntry, DirectoryLister, PackLister
from mcpack.persistence.pack_paths import PackPaths, resolve_pack_root

__all__ = [
    # JSON I/O
    "parse_json_text",
    "read_json_file",
    "write_json_file",
    "write_text_file",
    # Pack Paths
    "PackPaths",
    "resolve_pack_root",
    # Listers
    "PackLister",
    "DirectoryLister",
    "ArchiveLister",
    "DataEntry",
]
