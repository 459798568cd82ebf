"""Info command: prints a summary of a datapack directory or archive."""

from __future__ import annotations

import argparse
from pathlib import Path

from mcpack import elements, pack_formats
from mcpack.models.summary import PackSummary
from mcpack.prompts import Prompter
from mcpack.scanner import inspect_path


def render_formats(summary: PackSummary) -> str:
    """Pack format line, e.g. "Pack Formats: 48, 57, 61 (1.21-1.21.4)".

    Unknown formats are marked with "?" and left out of the version range.
    """
    labels = []
    for number in summary.supported_formats:
        label = str(number)
        if number == summary.pack_format:
            label = f"{label}*"
        elif not pack_formats.is_supported(number):
            label = f"{label}?"
        labels.append(label)
    plural = "s" if len(summary.supported_formats) > 1 else ""
    version_range = pack_formats.format_version_range(summary.supported_formats)
    line = f"Pack Format{plural}: {', '.join(labels)}"
    return f"{line} ({version_range})" if version_range else line


def render_pack_info(summary: PackSummary) -> list[str]:
    """Feature, filter and overlay sections of the manifest."""
    lines: list[str] = []
    if summary.features:
        lines += ["", "Enabled Features:"]
        for feature in summary.features:
            marker = "" if feature.known else " (unknown)"
            lines.append(f"  - {feature.name}{marker}")
    if summary.block_patterns:
        lines += ["", "File Filters:"]
        lines += [f"  - {pattern.describe()}" for pattern in summary.block_patterns]
    if summary.overlays:
        lines += ["", "Overlays:"]
        for overlay in summary.overlays:
            formats = ", ".join(str(number) for number in overlay.formats)
            lines.append(f"  - {overlay.directory} (formats: {formats})")
    return lines


def render_namespaces(summary: PackSummary) -> list[str]:
    """One block per namespace with its nonzero counts."""
    lines: list[str] = []
    for namespace in sorted(summary.namespaces):
        counts = summary.namespaces[namespace]
        lines += ["", f"Namespace: {namespace}"]
        for element_type, count in counts.ordered_counts():
            lines.append(f"  - {elements.label_for(element_type)}: {count}")
        if counts.world_gen:
            lines.append("  - This namespace alters world generation")
    return lines


def render_summary(
    summary: PackSummary,
    *,
    compact: bool = False,
    pack_info: bool = False,
    namespaces_only: bool = False,
) -> str:
    """Render the full info report.

    Args:
        compact: Only name, description and formats
        pack_info: Skip the namespace sections
        namespaces_only: Skip the manifest sections
    """
    lines = [summary.name, summary.description, "", render_formats(summary)]
    if not compact:
        if not namespaces_only:
            lines += render_pack_info(summary)
        if not pack_info:
            lines += render_namespaces(summary)
    return "\n".join(lines)


def cmd_info(args: argparse.Namespace, _prompter: Prompter) -> int:
    """Print information about a pack.

    Args:
        args: CLI arguments with path (defaults to the current directory)
        _prompter: Unused

    Returns:
        0 on success

    Raises:
        CliError: If the pack cannot be found or its manifest is invalid
    """
    target = Path(args.path) if args.path else Path.cwd()
    summary = inspect_path(target)
    print(render_summary(
        summary,
        compact=args.compact,
        pack_info=args.pack_info,
        namespaces_only=args.namespaces,
    ))
    return 0
