#!/usr/bin/env python3
"""CLI entry point for datapack scaffolding and inspection.

This module provides the argument parser and main entry point that
wires together all commands from the commands package.

Usage:
    python -m mcpack create my-pack --format 48 57 61 --namespace demo
    python -m mcpack info my-pack
    python -m mcpack add function tick --path my-pack
    python -m mcpack zip my-pack
"""

from __future__ import annotations

import argparse
import logging
import sys

from mcpack import __version__
from mcpack.commands import cmd_add, cmd_create, cmd_info, cmd_zip
from mcpack.config import STARTER_FOLDER_OPTIONS
from mcpack.elements import element_names
from mcpack.errors import CliError
from mcpack.pack_formats import known_formats
from mcpack.prompts import NonInteractivePrompter, Prompter, QuestionaryPrompter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_stdio_utf8() -> None:
    """Ensure non-ASCII descriptions can be printed on Windows terminals."""
    stdout = getattr(sys, "stdout", None)
    stderr = getattr(sys, "stderr", None)
    if hasattr(stdout, "reconfigure"):
        stdout.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]
    if hasattr(stderr, "reconfigure"):
        stderr.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr: warnings by default, everything with -v."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def select_prompter(no_input: bool) -> Prompter:
    """Interactive prompts only when allowed and stdin is a terminal."""
    if no_input or not sys.stdin.isatty():
        return NonInteractivePrompter()
    return QuestionaryPrompter()


def build_parser() -> argparse.ArgumentParser:
    """Build the complete argument parser with all subcommands.

    Returns:
        Configured ArgumentParser with subcommands for:
        - create
        - info
        - add
        - zip
    """
    parser = argparse.ArgumentParser(
        prog="mcpack",
        description="Create, inspect, extend and package Minecraft datapacks.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mcpack create my-pack --format 48 57 61 --namespace demo --folders function recipe
  mcpack info my-pack
  mcpack info my-pack_1.21.4.zip --namespaces
  mcpack add function utils/tick --path my-pack --namespace demo
  mcpack zip my-pack --output-dir dist
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file decision to stderr.",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; use defaults and fail on missing required answers.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------------------------------------------------
    # create command
    # ---------------------------------------------------------------------
    create = subparsers.add_parser("create", help="Create a new datapack.")
    create.add_argument("name", nargs="?", help="Name of the datapack (creates folder with this name).")
    create.add_argument("--name", dest="name_option", help="Same as the positional name.")
    create.add_argument("-d", "--description", help="Description of the datapack.")
    create.add_argument("-i", "--icon", help="Path to pack icon (must be PNG).")
    create.add_argument(
        "-f",
        "--format",
        type=int,
        nargs="+",
        metavar="N",
        help=f"Pack format(s) to support. Known: {', '.join(map(str, known_formats()))}.",
    )
    create.add_argument(
        "-m",
        "--minecraft",
        action="store_true",
        help="Include the minecraft namespace.",
    )
    create.add_argument("--load", action="store_true", help="Include the minecraft load function tag.")
    create.add_argument("--tick", action="store_true", help="Include the minecraft tick function tag.")
    create.add_argument("-n", "--namespace", help="Custom namespace.")
    create.add_argument(
        "-F",
        "--folders",
        nargs="+",
        metavar="FOLDER",
        help=f"Starter folders for the custom namespace (e.g. {' '.join(STARTER_FOLDER_OPTIONS)}).",
    )
    create.add_argument("-o", "--output-dir", help="Directory to create the pack in (default: cwd).")
    create.add_argument("--force", action="store_true", help="Overwrite an existing pack folder.")
    create.add_argument("--no-icon", action="store_true", help="Do not add a pack icon.")
    create.add_argument(
        "--no-starter-files",
        action="store_true",
        help="Do not create starter folders in the custom namespace.",
    )
    create.add_argument(
        "--no-minecraft-tags",
        action="store_true",
        help="Do not create minecraft function tags.",
    )
    create.add_argument("--no-namespace", action="store_true", help="Do not create a custom namespace.")
    create.set_defaults(handler=cmd_create)

    # ---------------------------------------------------------------------
    # info command
    # ---------------------------------------------------------------------
    info = subparsers.add_parser("info", help="Show information about a datapack or its zip.")
    info.add_argument("path", nargs="?", help="Pack directory or zip file (default: cwd).")
    info.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="Only show name, description and formats.",
    )
    scope = info.add_mutually_exclusive_group()
    scope.add_argument("--pack-info", action="store_true", help="Only show pack.mcmeta details.")
    scope.add_argument("--namespaces", action="store_true", help="Only show namespace contents.")
    info.set_defaults(handler=cmd_info)

    # ---------------------------------------------------------------------
    # add command
    # ---------------------------------------------------------------------
    add = subparsers.add_parser("add", help="Add an element to a datapack.")
    add.add_argument(
        "element",
        nargs="?",
        help=f"Element type ({', '.join(element_names())}).",
    )
    add.add_argument("name", nargs="?", help="File name without extension; may include folders.")
    add.add_argument("-n", "--namespace", help="Namespace to add the element to.")
    add.add_argument("-p", "--path", help="Pack directory (default: cwd).")
    add.add_argument("--force", action="store_true", help="Overwrite an existing file.")
    add.set_defaults(handler=cmd_add)

    # ---------------------------------------------------------------------
    # zip command
    # ---------------------------------------------------------------------
    zip_parser = subparsers.add_parser("zip", help="Compress a datapack into a zip archive.")
    source = zip_parser.add_mutually_exclusive_group()
    source.add_argument("path", nargs="?", help="Pack directory (default: cwd).")
    source.add_argument("--input-dir", help="Pack directory, as an option.")
    zip_parser.add_argument("--name", help="Archive file name (must end with .zip).")
    zip_parser.add_argument("-o", "--output-dir", help="Directory to write the archive to.")
    zip_parser.add_argument("--force", action="store_true", help="Overwrite an existing archive.")
    zip_parser.set_defaults(handler=cmd_zip)

    return parser


def main(argv: list[str] | None = None, prompter: Prompter | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        prompter: Prompter override; chosen from --no-input and the terminal when None

    Returns:
        Exit code (0 for success, 1 for error, 130 when interrupted)

    Handles:
        - CliError: User-facing error messages
        - OSError: File system and permission failures
    """
    _configure_stdio_utf8()
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if getattr(args, "name_option", None):
        args.name = args.name_option

    try:
        handler = getattr(args, "handler", None)
        if handler is None:
            parser.print_help()
            return 1
        return int(handler(args, prompter or select_prompter(args.no_input)))
    except CliError as error:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
