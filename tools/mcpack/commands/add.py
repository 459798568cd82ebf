"""Add command: writes a new element file into an existing pack."""

from __future__ import annotations

import argparse
from pathlib import Path

from mcpack import elements
from mcpack.adder import add_element
from mcpack.config import MINECRAFT_NAMESPACE
from mcpack.errors import Outcome
from mcpack.persistence.pack_paths import resolve_pack_root
from mcpack.prompts import Prompter
from mcpack.validation import validate_element_type


def choose_namespace(existing: list[str], prompter: Prompter, *, flags_used: bool) -> str:
    """Pick the namespace to add to when none was given.

    When the element type or name came from flags, the minecraft namespace
    is left out of automatic choices. A single candidate is used directly;
    several are offered in a select; none falls back to a text prompt.
    """
    candidates = [ns for ns in existing if ns != MINECRAFT_NAMESPACE] if flags_used else list(existing)

    if not candidates:
        if flags_used and existing:
            return prompter.ask_select("Select namespace to add the element to", existing)
        return prompter.ask_text("Enter namespace name")
    if len(candidates) == 1:
        return candidates[0]
    return prompter.ask_select("Select namespace to add the element to", candidates)


def cmd_add(args: argparse.Namespace, prompter: Prompter) -> int:
    """Add an element to a pack.

    Returns:
        0 on success, including when an existing file is kept

    Raises:
        ManifestNotFoundError: If the target is not a pack
        CliError: If the element type, namespace or name is invalid
    """
    flags_used = args.element is not None or args.name is not None

    element_type = args.element
    if element_type is None:
        element_type = prompter.ask_select("Select element type to add", elements.element_names())
    validate_element_type(element_type)

    name = args.name
    if name is None:
        name = prompter.ask_text("Enter name for the new file")

    paths = resolve_pack_root(Path(args.path) if args.path else Path.cwd())
    namespace = args.namespace
    if namespace is None:
        namespace = choose_namespace(paths.list_namespaces(), prompter, flags_used=flags_used)

    result = add_element(
        paths.root,
        namespace,
        element_type,
        name,
        force=args.force,
        prompter=prompter,
    )

    if result.outcome is Outcome.SKIPPED:
        print(f"Skipped creating '{result.relative}'")
        return 0

    print(f"Created {element_type} '{result.relative}'")
    return 0
