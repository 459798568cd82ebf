"""Zip command: compresses a pack directory into an archive."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from mcpack.archiver import zip_pack
from mcpack.errors import Outcome
from mcpack.prompts import Prompter


def _print_progress(processed: int, total: int) -> None:
    if not sys.stderr.isatty():
        return
    end = "\n" if processed >= total else ""
    print(f"\r{processed}/{total} files", end=end, file=sys.stderr, flush=True)


def resolve_output_dir(args: argparse.Namespace, source: Path, given: bool) -> Path:
    """Output directory: --output-dir, else the current directory when a
    path was given, else the pack itself."""
    if args.output_dir:
        return Path(args.output_dir)
    return Path.cwd() if given else source


def cmd_zip(args: argparse.Namespace, prompter: Prompter) -> int:
    """Create a zip archive of a pack directory.

    Returns:
        0 on success, including when an existing archive is kept

    Raises:
        ManifestNotFoundError: If the source is not a pack
        InvalidNameError: If --name does not end with .zip
    """
    given = args.path or args.input_dir
    source = Path(given) if given else Path.cwd()

    result = zip_pack(
        source,
        resolve_output_dir(args, source, bool(given)),
        name=args.name,
        force=args.force,
        prompter=prompter,
        progress=_print_progress,
    )

    if result.outcome is Outcome.SKIPPED:
        print("Operation cancelled")
        return 0

    print(f"Created datapack archive: {result.path.name} ({result.files} files)")
    return 0
