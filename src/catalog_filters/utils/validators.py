"""Input validation utilities for catalog filter parameters."""

import re
from typing import Any

from ..exceptions import InvalidEntityRefError
from ..model import parse_entity_ref

FIELD_SEGMENT_PATTERN = re.compile(r"^[^.\s]+$")


def validate_field_path(path: str) -> bool:
    """Validate a dot-delimited catalog field path.

    Args:
        path: Field path such as ``kind`` or ``spec.type``

    Returns:
        True if every segment is non-empty and free of whitespace
    """
    if not isinstance(path, str) or not path:
        return False
    return all(FIELD_SEGMENT_PATTERN.match(segment) for segment in path.split("."))


def validate_entity_ref(ref: str) -> bool:
    """Validate that a string parses as a full entity reference."""
    try:
        parse_entity_ref(ref)
        return True
    except InvalidEntityRefError:
        return False


def validate_catalog_filters(filters: Any) -> tuple[bool, list[str]]:
    """Validate a catalog filter fragment.

    Args:
        filters: Mapping of field path to a value or list of values

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    if not isinstance(filters, dict):
        return False, ["Catalog filters must be a mapping of field path to value(s)"]

    errors = []
    for path, value in filters.items():
        if not validate_field_path(path):
            errors.append(f"Invalid field path: {path!r}")
            continue

        if isinstance(value, str):
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                errors.append(f"Field {path}: value list must not be empty")
            elif not all(isinstance(v, str) for v in value):
                errors.append(f"Field {path}: all values must be strings")
            continue

        errors.append(f"Field {path}: value must be a string or list of strings")

    return len(errors) == 0, errors
