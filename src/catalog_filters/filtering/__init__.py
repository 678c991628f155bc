"""
Catalog Entity Filtering Module

This module provides the entity filter contract, the built-in filters and
their composition into one catalog request plus one local predicate.

Key Components:
- EntityFilter: filter contract with optional catalog and local capabilities
- EntityKindFilter, EntityTypeFilter: catalog-side narrowing by kind and spec.type
- EntityTagFilter, UserListFilter: client-side predicates
- FilterManager: combines the active filters

Usage:
    from catalog_filters.filtering import EntityKindFilter, FilterManager, UserListFilter

    manager = FilterManager({"kind": EntityKindFilter("component"), "user": UserListFilter("owned")})
    params = manager.build_query_params()
    result = manager.apply(entities, env)
"""

from .catalog_query import build_catalog_query, run_catalog_query
from .filter_manager import FilterManager, FilterResult
from .filters import EntityKindFilter, EntityTagFilter, EntityTypeFilter, UserListFilter
from .types import CatalogFilters, EntityFilter, FilterEnvironment, FilterVariant, UserListFilterKind

__all__ = [
    "CatalogFilters",
    "EntityFilter",
    "EntityKindFilter",
    "EntityTagFilter",
    "EntityTypeFilter",
    "FilterEnvironment",
    "FilterManager",
    "FilterResult",
    "FilterVariant",
    "UserListFilter",
    "UserListFilterKind",
    "build_catalog_query",
    "run_catalog_query",
]
