"""
Evaluate catalog filters over raw entity JSON with JSON Query.

Used when a listing was fetched without server-side narrowing (for example a
cached snapshot) and the catalog filters still have to be applied.
"""

import json
import logging
import re
from typing import Any

from jsonquerylang import JsonQueryOptions, build_function, jsonquery

from ..exceptions import CatalogQueryError
from .types import CatalogFilters

logger = logging.getLogger(__name__)

UNQUOTED_PROPERTY_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


# Catalog values match case-insensitively, so both sides are compared in lower case.
CATALOG_QUERY_OPTIONS: JsonQueryOptions = {"functions": {"lower": build_function(_lower)}}


def _property_path(field_path: str) -> str:
    """Translate ``spec.type`` into the JSON Query getter ``.spec.type``."""
    parts = []
    for segment in field_path.split("."):
        if UNQUOTED_PROPERTY_PATTERN.match(segment):
            parts.append(f".{segment}")
        else:
            parts.append(f".{json.dumps(segment)}")
    return "".join(parts)


def _combine(conditions: list[str], operator: str) -> str:
    """Join parenthesized conditions pairwise with a binary operator."""
    expression = conditions[0]
    for condition in conditions[1:]:
        expression = f"({expression} {operator} {condition})"
    return expression


def build_catalog_query(filters: CatalogFilters) -> str:
    """Build a JSON Query text expression that keeps entities matching every filter.

    Field values are compared case-insensitively through the custom ``lower``
    function registered in ``CATALOG_QUERY_OPTIONS``.

    Args:
        filters: Catalog filters, field path to a value or list of values

    Returns:
        Query text such as ``filter((lower(.kind) == "component"))``; empty string
        when there is nothing to filter on
    """
    conditions = []
    for field_path, value in filters.items():
        getter = _property_path(field_path)
        if isinstance(value, str):
            conditions.append(f"(lower({getter}) == {json.dumps(_lower(value))})")
        else:
            alternatives = [f"(lower({getter}) == {json.dumps(_lower(v))})" for v in value]
            conditions.append(_combine(alternatives or ["false"], "or"))

    if not conditions:
        return ""
    return f"filter({_combine(conditions, 'and')})"


def run_catalog_query(raw_entities: list[dict[str, Any]], filters: CatalogFilters) -> list[dict[str, Any]]:
    """Apply catalog filters to raw entity dicts.

    Raises:
        CatalogQueryError: If the query cannot be evaluated
    """
    query = build_catalog_query(filters)
    if not query:
        return raw_entities

    logger.debug(f"Running catalog query: {query}")
    try:
        result = jsonquery(raw_entities, query, CATALOG_QUERY_OPTIONS)
    except Exception as e:
        raise CatalogQueryError(f"Failed to evaluate catalog filters: {e}", query=query) from e

    logger.debug(f"Catalog query kept {len(result)} of {len(raw_entities)} entities")
    return result
