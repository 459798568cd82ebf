"""Input validation for create, add and zip.

Every check runs before the operation touches the disk and raises a typed
CliError describing the first problem found.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable

from mcpack import elements, pack_formats
from mcpack.config import ARCHIVE_SUFFIX, ICON_EXTENSION
from mcpack.errors import (
    InvalidElementTypeError,
    InvalidFormatError,
    InvalidIconError,
    InvalidNameError,
    InvalidNamespaceError,
)
from mcpack.models.common import Namespace, is_standard_namespace

logger = logging.getLogger(__name__)


def validate_formats(formats: Iterable[int]) -> list[int]:
    """Check chosen pack formats against the format table.

    Args:
        formats: Chosen format numbers, in any order, possibly repeated

    Returns:
        The formats sorted ascending without duplicates

    Raises:
        InvalidFormatError: If no format is given or one is unknown
    """
    chosen = sorted(set(formats))
    if not chosen:
        raise InvalidFormatError(None, pack_formats.describe_formats())
    for pack_format in chosen:
        if not pack_formats.is_supported(pack_format):
            raise InvalidFormatError(pack_format, pack_formats.describe_formats())
    return chosen


def validate_icon(icon: str | Path) -> Path:
    """Check that an icon path names an existing PNG file.

    Raises:
        InvalidIconError: If the file is missing or its extension is not .png
    """
    path = Path(icon)
    if not path.is_file():
        raise InvalidIconError(str(icon), "Icon file does not exist")
    if path.suffix.lower() != ICON_EXTENSION:
        raise InvalidIconError(str(icon), "Icon must be a PNG file")
    return path


def validate_namespace(namespace: str) -> Namespace:
    """Check that a namespace is usable as a folder name.

    Surrounding whitespace is stripped. Names with characters the game
    rejects are accepted but logged.

    Raises:
        InvalidNamespaceError: If the namespace is empty or whitespace
    """
    cleaned = namespace.strip() if isinstance(namespace, str) else ""
    if not cleaned or "/" in cleaned or "\\" in cleaned or cleaned in (".", ".."):
        raise InvalidNamespaceError(namespace)
    if not is_standard_namespace(cleaned):
        logger.warning(
            "Namespace '%s' contains characters outside [a-z0-9_.-]; the game may reject it",
            cleaned,
        )
    return Namespace(cleaned)


def validate_element_type(element_type: str) -> elements.ElementType:
    """Look up an element type in the catalog.

    Raises:
        InvalidElementTypeError: If the name is not in the catalog
    """
    element = elements.get_element(element_type)
    if element is None:
        raise InvalidElementTypeError(element_type, elements.element_names())
    return element


def validate_element_types(names: Iterable[str]) -> list[str]:
    """Validate a list of starter folder names, keeping their order."""
    return [validate_element_type(name).name for name in names]


def validate_element_name(name: str) -> PurePosixPath:
    """Check a relative element name such as "utils/tick".

    Backslashes are treated as separators. The name must stay inside the
    category folder.

    Raises:
        InvalidNameError: If the name is empty, absolute or escapes its folder
    """
    cleaned = name.strip().replace("\\", "/") if isinstance(name, str) else ""
    if not cleaned:
        raise InvalidNameError(name, "name cannot be empty")
    relative = PurePosixPath(cleaned)
    if relative.is_absolute():
        raise InvalidNameError(name, "name must be relative")
    if any(part in ("..", ".") for part in relative.parts):
        raise InvalidNameError(name, "name cannot contain '.' or '..' segments")
    return relative


def validate_archive_name(name: str) -> str:
    """Check a custom archive file name.

    Raises:
        InvalidNameError: If the name does not end with .zip or contains a path
    """
    if not name.endswith(ARCHIVE_SUFFIX):
        raise InvalidNameError(name, f"the zip file name must end with '{ARCHIVE_SUFFIX}'")
    if "/" in name or "\\" in name:
        raise InvalidNameError(name, "use --output-dir to choose the directory")
    return name
