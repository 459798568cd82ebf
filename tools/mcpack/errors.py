"""Typed error hierarchy for datapack operations.

All domain errors extend CliError and carry structured context. User-facing
messages are derived from the error type and context so the CLI boundary can
print them as a single line.

A declined overwrite is not an error: operations report it through
Outcome.SKIPPED instead.
"""

from __future__ import annotations

from enum import Enum


# -----------------------------------------------------------------------------
# Outcomes
# -----------------------------------------------------------------------------

class Outcome(str, Enum):
    """Result of an operation that may write over existing content.

    - CREATED: Target did not exist and was written
    - OVERWRITTEN: Target existed and was replaced (forced or confirmed)
    - SKIPPED: Target existed and the user declined to overwrite it
    """
    CREATED = "created"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"


# -----------------------------------------------------------------------------
# Error Hierarchy
# -----------------------------------------------------------------------------

class CliError(RuntimeError):
    """Base error for all CLI operations.

    Subclasses provide structured context; the message passed to the base
    class is the user-facing text. Never raise raw CliError.
    """
    pass


class InvalidFormatError(CliError):
    """Pack format number is not in the format table.

    Attributes:
        value: The rejected format (None when no format was chosen)
        valid: Human-readable list of supported formats
    """
    def __init__(self, value: int | None, valid: str) -> None:
        self.value = value
        self.valid = valid
        if value is None:
            super().__init__(f"No pack formats selected. Valid formats are: {valid}")
        else:
            super().__init__(f"Invalid pack format: {value}. Valid formats are: {valid}")


class InvalidElementTypeError(CliError):
    """Element type is not in the element catalog.

    Attributes:
        element_type: The rejected type name
        valid: Supported type names
    """
    def __init__(self, element_type: str, valid: list[str]) -> None:
        self.element_type = element_type
        self.valid = valid
        super().__init__(
            f"Invalid element type '{element_type}'. Supported types are: {', '.join(valid)}"
        )


class InvalidIconError(CliError):
    """Icon path is missing or is not a PNG image.

    Attributes:
        path: The icon path as given
        detail: Explanation of the problem
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{detail}: {path}")


class InvalidNamespaceError(CliError):
    """Namespace is empty or whitespace."""
    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__("Namespace cannot be empty")


class InvalidNameError(CliError):
    """Element or archive name is not usable.

    Attributes:
        name: The rejected name
        detail: Explanation of the problem
    """
    def __init__(self, name: str, detail: str) -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Invalid name '{name}': {detail}")


class PathNotFoundError(CliError):
    """A path the operation depends on does not exist.

    Attributes:
        path: The missing path
        what: What the path was expected to be ("Zip file", "Directory", ...)
    """
    def __init__(self, path: str, what: str) -> None:
        self.path = path
        self.what = what
        super().__init__(f"{what} not found: {path}")


class ManifestNotFoundError(CliError):
    """No pack.mcmeta at the pack root or inside the archive.

    Attributes:
        location: Directory or archive that was searched
    """
    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Not a datapack (pack.mcmeta not found in {location})")


class InvalidJsonError(CliError):
    """JSON parsing failed.

    Attributes:
        path: The file that failed to parse
        detail: Parser error message
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid JSON in {path}: {detail}")


class ManifestFieldError(CliError):
    """Required manifest field is missing or has the wrong type.

    Attributes:
        path: Manifest location
        field: Dotted field name (e.g. "pack.pack_format")
        detail: Explanation of the problem
    """
    def __init__(self, path: str, field: str, detail: str) -> None:
        self.path = path
        self.field = field
        self.detail = detail
        super().__init__(f"Invalid {path}: {detail}")


class ArchiveError(CliError):
    """Archive could not be read or written.

    Attributes:
        path: Archive path
        detail: Underlying error message
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to process zip archive {path}: {detail}")


class MissingInputError(CliError):
    """A required answer was not given on the command line in non-interactive mode."""
    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"Missing input for '{prompt}' (interactive prompts are disabled)")


class PromptAbortedError(CliError):
    """The user cancelled an interactive prompt."""
    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"Prompt cancelled: {prompt}")
