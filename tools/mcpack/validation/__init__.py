"""Validation layer for datapack operations.

This module exports the input checks shared by create, add and zip.
"""

from mcpack.validation.settings import (
    validate_archive_name,
    validate_element_name,
    validate_element_type,
    validate_element_types,
    validate_formats,
    validate_icon,
    validate_namespace,
)

__all__ = [
    "validate_formats",
    "validate_icon",
    "validate_namespace",
    "validate_element_type",
    "validate_element_types",
    "validate_element_name",
    "validate_archive_name",
]
