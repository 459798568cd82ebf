"""Create command: scaffolds a new datapack.

Anything not given on the command line is asked through the prompter;
the --no-* flags skip a question entirely.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from mcpack import pack_formats
from mcpack.builder import PackSettings, build_pack
from mcpack.config import (
    DEFAULT_DESCRIPTION,
    DEFAULT_PACK_NAME,
    MINECRAFT_TAG_OPTIONS,
    STARTER_FOLDER_OPTIONS,
)
from mcpack.errors import Outcome
from mcpack.prompts import Prompter

FUNCTION_TAG_SUFFIX = ".mcfunction"


def _format_choices() -> dict[str, int]:
    return {
        f"Format {number} ({', '.join(pack_formats.versions_for(number) or ())})": number
        for number in pack_formats.known_formats()
    }


def _ask_formats(prompter: Prompter) -> list[int]:
    choices = _format_choices()
    labels = list(choices)
    selected = prompter.ask_multi_select("Select pack format(s)", labels, defaults=labels[:1])
    return [choices[label] for label in selected]


def _ask_icon(args: argparse.Namespace, prompter: Prompter) -> Path | None:
    if args.no_icon:
        return None
    if args.icon:
        return Path(args.icon)
    if not prompter.ask_confirm("Do you want to add a pack icon?", default=False):
        return None
    return Path(prompter.ask_text("Path to pack icon (PNG)"))


def _ask_minecraft_tags(
    args: argparse.Namespace, prompter: Prompter, include_minecraft: bool
) -> list[str]:
    if args.no_minecraft_tags or not include_minecraft:
        return []
    flagged = [tag for tag in MINECRAFT_TAG_OPTIONS if getattr(args, tag)]
    if args.minecraft or flagged:
        return flagged
    options = [f"{tag}{FUNCTION_TAG_SUFFIX}" for tag in MINECRAFT_TAG_OPTIONS]
    selected = prompter.ask_multi_select("Select minecraft tags to include", options)
    return [tag.removesuffix(FUNCTION_TAG_SUFFIX) for tag in selected]


def _ask_namespace(args: argparse.Namespace, prompter: Prompter) -> str | None:
    if args.namespace is not None:
        return args.namespace
    if args.no_namespace:
        return None
    while True:
        namespace = prompter.ask_text("Enter custom namespace")
        if namespace.strip():
            return namespace
        print("Namespace cannot be empty. Please enter a valid namespace.")


def _ask_folders(args: argparse.Namespace, prompter: Prompter, namespace: str | None) -> list[str]:
    if args.no_starter_files or namespace is None:
        return []
    if args.folders is not None:
        return list(args.folders)
    return prompter.ask_multi_select(
        "Select starter folders for custom namespace", list(STARTER_FOLDER_OPTIONS)
    )


def collect_settings(args: argparse.Namespace, prompter: Prompter) -> PackSettings:
    """Resolve create arguments and prompt answers into PackSettings.

    Args:
        args: Parsed create arguments
        prompter: Source of answers for anything not given as a flag

    Returns:
        Unvalidated PackSettings (build_pack validates them)
    """
    name = args.name or prompter.ask_text("Enter Datapack name", default=DEFAULT_PACK_NAME)
    base_dir = Path(args.output_dir) if args.output_dir else Path.cwd()
    description = args.description
    if description is None:
        description = prompter.ask_text("Datapack description", default=DEFAULT_DESCRIPTION)
    icon_path = _ask_icon(args, prompter)
    formats = list(args.format) if args.format else _ask_formats(prompter)

    include_minecraft = args.minecraft or args.load or args.tick or prompter.ask_confirm(
        "Include minecraft namespace?", default=False
    )
    minecraft_tags = _ask_minecraft_tags(args, prompter, include_minecraft)
    namespace = _ask_namespace(args, prompter)
    folders = _ask_folders(args, prompter, namespace)

    return PackSettings(
        directory=base_dir / name,
        name=name,
        description=description,
        pack_formats=formats,
        icon_path=icon_path,
        include_minecraft_namespace=include_minecraft,
        minecraft_tags=minecraft_tags,
        custom_namespace=namespace,
        namespace_folders=folders,
    )


def cmd_create(args: argparse.Namespace, prompter: Prompter) -> int:
    """Create a datapack directory.

    Returns:
        0 on success, including when the user declines to overwrite

    Raises:
        CliError: If a setting is invalid
    """
    settings = collect_settings(args, prompter)
    outcome = build_pack(settings, force=args.force, prompter=prompter)

    if outcome is Outcome.SKIPPED:
        print("Operation cancelled")
        return 0

    print(f"Successfully created datapack '{settings.name}'")
    print(f"  {settings.directory}")
    return 0
