"""
Filter manager for combining active filters into one catalog request and one
local predicate.
"""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

from ..constants import FILTER_QUERY_PARAM
from ..exceptions import InvalidFilterValueError
from ..model import Entity
from ..utils.validators import validate_catalog_filters
from .catalog_query import run_catalog_query
from .types import CatalogFilters, EntityFilter, FilterEnvironment

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Result of a filtering pass."""

    success: bool
    entities: list[Entity]
    total_count: int
    matched_count: int
    execution_time_ms: float
    filters_applied: list[str]  # names of every active filter in the pass
    catalog_filters: CatalogFilters = field(default_factory=dict)
    error: Optional[str] = None


class FilterManager:
    """Holds the active filters, keyed by name, and applies them together."""

    def __init__(self, filters: Optional[dict[str, Optional[EntityFilter]]] = None):
        self._filters: dict[str, EntityFilter] = {}
        if filters:
            self.update_filters(**filters)

    @property
    def filters(self) -> dict[str, EntityFilter]:
        return dict(self._filters)

    @property
    def active_filters(self) -> list[EntityFilter]:
        return list(self._filters.values())

    def update_filters(self, **filters: Optional[EntityFilter]) -> None:
        """Set, replace or (with None) remove named filters."""
        for name, entity_filter in filters.items():
            if entity_filter is None:
                if self._filters.pop(name, None) is not None:
                    logger.debug(f"Removed filter '{name}'")
            else:
                self._filters[name] = entity_filter
                logger.debug(f"Set filter '{name}' to {entity_filter!r}")

    def get_catalog_filters(self) -> CatalogFilters:
        """Merge the catalog filters of every active filter.

        Filters are merged in the order they were first set; when two filters
        produce the same field, the later one wins.
        """
        merged: CatalogFilters = {}
        for name, entity_filter in self._filters.items():
            if entity_filter.get_catalog_filters is None:
                continue
            for field_path, value in entity_filter.get_catalog_filters().items():
                if field_path in merged:
                    logger.debug(f"Filter '{name}' overrides catalog filter on '{field_path}'")
                merged[field_path] = value
        return merged

    def build_query_params(self) -> list[tuple[str, str]]:
        """Encode the merged catalog filters as catalog API query parameters.

        All fields go into a single ``filter`` parameter as comma separated
        ``field=value`` pairs; a list value contributes one pair per value.

        Raises:
            InvalidFilterValueError: If a filter produced an invalid fragment
        """
        catalog_filters = self.get_catalog_filters()
        is_valid, errors = validate_catalog_filters(catalog_filters)
        if not is_valid:
            raise InvalidFilterValueError(
                f"Invalid catalog filters: {'; '.join(errors)}",
                error_code="invalid_catalog_filters",
                details={"errors": errors},
            )

        pairs = []
        for field_path, value in catalog_filters.items():
            values = [value] if isinstance(value, str) else list(value)
            pairs.extend(f"{field_path}={v}" for v in values)

        if not pairs:
            return []
        return [(FILTER_QUERY_PARAM, ",".join(pairs))]

    def build_query_string(self) -> str:
        """URL-encoded form of ``build_query_params``."""
        return urlencode(self.build_query_params())

    def filter_entity(self, entity: Entity, env: FilterEnvironment) -> bool:
        """Return True if the entity passes every active local predicate."""
        for entity_filter in self._filters.values():
            if entity_filter.filter_entity is None:
                continue
            if not entity_filter.filter_entity(entity, env):
                return False
        return True

    def apply(self, entities: Iterable[Entity], env: FilterEnvironment) -> FilterResult:
        """Apply the local predicates to entities already fetched from the catalog."""
        start_time = time.time()
        entities = list(entities)
        matched = [entity for entity in entities if self.filter_entity(entity, env)]
        execution_time = (time.time() - start_time) * 1000

        logger.debug(f"Local filtering kept {len(matched)} of {len(entities)} entities in {execution_time:.2f}ms")

        return FilterResult(
            success=True,
            entities=matched,
            total_count=len(entities),
            matched_count=len(matched),
            execution_time_ms=execution_time,
            filters_applied=list(self._filters),
        )

    def apply_catalog_filters(self, raw_entities: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Narrow raw entity JSON by the merged catalog filters."""
        return run_catalog_query(raw_entities, self.get_catalog_filters())

    def run(self, raw_entities: list[dict[str, Any]], env: FilterEnvironment) -> FilterResult:
        """Apply catalog filters and local predicates to raw entity JSON."""
        start_time = time.time()
        catalog_filters: CatalogFilters = {}

        try:
            catalog_filters = self.get_catalog_filters()
            narrowed = run_catalog_query(raw_entities, catalog_filters)
            entities = [Entity.from_dict(item) for item in narrowed]
            matched = [entity for entity in entities if self.filter_entity(entity, env)]
            execution_time = (time.time() - start_time) * 1000

            return FilterResult(
                success=True,
                entities=matched,
                total_count=len(raw_entities),
                matched_count=len(matched),
                execution_time_ms=execution_time,
                filters_applied=list(self._filters),
                catalog_filters=catalog_filters,
            )

        except Exception as e:
            logger.exception(f"Error filtering entities: {e}")
            execution_time = (time.time() - start_time) * 1000

            return FilterResult(
                success=False,
                entities=[],
                total_count=len(raw_entities),
                matched_count=0,
                execution_time_ms=execution_time,
                filters_applied=[],
                catalog_filters=catalog_filters,
                error=str(e),
            )
