"""Common types shared across datapack models."""

from __future__ import annotations

from typing import NewType

from mcpack.config import NAMESPACE_REGEX

# -----------------------------------------------------------------------------
# Namespace Type
# -----------------------------------------------------------------------------

Namespace = NewType("Namespace", str)
"""Branded string type for a namespace folder under data/.

This is a NewType for documentation and type-checking purposes.
Use validation.validate_namespace() to convert raw strings safely.
"""


def is_standard_namespace(value: str) -> bool:
    """Check if a namespace uses only the characters the game accepts.

    Args:
        value: The raw namespace string

    Returns:
        True if the string matches [a-z0-9_.-]+
    """
    return isinstance(value, str) and bool(NAMESPACE_REGEX.fullmatch(value))
