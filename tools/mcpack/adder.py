"""Add-element: writes one templated element file into a pack."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from mcpack.config import DATA_DIR
from mcpack.elements import default_content_for
from mcpack.errors import Outcome
from mcpack.persistence.json_io import write_text_file
from mcpack.persistence.pack_paths import resolve_pack_root
from mcpack.prompts import Prompter
from mcpack.validation import validate_element_name, validate_element_type, validate_namespace

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddResult:
    """Where the element went and whether it was written."""
    path: Path
    relative: str
    outcome: Outcome


def element_path(root: Path, namespace: str, element_type: str, name: str) -> Path:
    """Compute data/<namespace>/<folder>/<name><extension> under a pack root.

    Raises:
        InvalidElementTypeError, InvalidNamespaceError, InvalidNameError
    """
    element = validate_element_type(element_type)
    relative = validate_element_name(name)
    folder = root.joinpath(DATA_DIR, validate_namespace(namespace), element.directory)
    stem = relative.name.removesuffix(element.extension) or relative.name
    return folder.joinpath(*relative.parts).with_name(f"{stem}{element.extension}")


def add_element(
    root: Path,
    namespace: str,
    element_type: str,
    name: str,
    *,
    force: bool,
    prompter: Prompter,
) -> AddResult:
    """Write an element file with its catalog template.

    Args:
        root: Pack root (must hold pack.mcmeta)
        namespace: Target namespace, created if missing
        element_type: Catalog element name
        name: Relative file name without extension; may contain subfolders
        force: Overwrite an existing file without asking
        prompter: Asked to confirm overwriting an existing file

    Returns:
        AddResult; outcome is SKIPPED when the user declined to overwrite,
        in which case the existing file is untouched

    Raises:
        ManifestNotFoundError: If root is not a pack
        CliError: If the element type, namespace or name is invalid
    """
    paths = resolve_pack_root(root)
    file_path = element_path(paths.root, namespace, element_type, name)
    relative = file_path.relative_to(paths.data_dir).as_posix()

    outcome = Outcome.CREATED
    if file_path.exists():
        if not force and not prompter.ask_confirm(
            f"File '{relative}' already exists. Overwrite?", default=False
        ):
            logger.info("Skipped existing %s", file_path)
            return AddResult(path=file_path, relative=relative, outcome=Outcome.SKIPPED)
        outcome = Outcome.OVERWRITTEN

    write_text_file(file_path, default_content_for(element_type))
    logger.info("Wrote %s element %s", element_type, file_path)
    return AddResult(path=file_path, relative=relative, outcome=outcome)
