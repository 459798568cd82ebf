"""JSON file I/O with atomic writes.

This module handles reading and writing pack files:
- Manifest parsing from disk or from archive bytes
- Pretty-printed output with a 2-space indent, as the game's own files use
- Atomic write pattern (write temp file, then rename)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mcpack.errors import InvalidJsonError

logger = logging.getLogger(__name__)


def parse_json_text(raw: str, source: str) -> Any:
    """Parse JSON text read from a file or archive entry.

    Args:
        raw: Raw JSON content
        source: Location used in error messages

    Raises:
        InvalidJsonError: If parsing fails
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(source, str(exc)) from exc


def read_json_file(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        InvalidJsonError: If parsing fails or the file is not UTF-8
        FileNotFoundError: If file doesn't exist
    """
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InvalidJsonError(str(path), str(exc)) from exc
    return parse_json_text(raw, str(path))


def write_text_file(path: Path, content: str) -> None:
    """Write text to a file atomically.

    Uses a write-then-rename pattern:
    1. Write to a temporary file (path.tmp)
    2. Rename temp file to target path

    Invariants:
        - Parent directories are created if they don't exist
        - Original file is not corrupted if write fails partway
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(f"{path.name}.tmp")
    temp_path.write_text(content, encoding="utf-8")
    temp_path.replace(path)
    logger.debug("Wrote %s", path)


def write_json_file(path: Path, payload: Any) -> None:
    """Serialize payload as pretty JSON and write it atomically."""
    write_text_file(path, json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
