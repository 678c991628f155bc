"""Utility modules for catalog filtering."""

from .validators import (
    validate_catalog_filters,
    validate_entity_ref,
    validate_field_path,
)

__all__ = [
    "validate_catalog_filters",
    "validate_entity_ref",
    "validate_field_path",
]
