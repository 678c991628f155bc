"""Catalog entity filters: catalog request narrowing and client-side predicates."""

from .exceptions import CatalogFilterError, CatalogQueryError, InvalidEntityRefError, InvalidFilterValueError
from .filtering import (
    EntityFilter,
    EntityKindFilter,
    EntityTagFilter,
    EntityTypeFilter,
    FilterEnvironment,
    FilterManager,
    FilterResult,
    UserListFilter,
    UserListFilterKind,
)
from .model import Entity, EntityRef, UserEntity, parse_entity_ref, stringify_entity_ref
from .ownership import is_owner_of

__version__ = "1.0.0"
__all__ = [
    "CatalogFilterError",
    "CatalogQueryError",
    "Entity",
    "EntityFilter",
    "EntityKindFilter",
    "EntityRef",
    "EntityTagFilter",
    "EntityTypeFilter",
    "FilterEnvironment",
    "FilterManager",
    "FilterResult",
    "InvalidEntityRefError",
    "InvalidFilterValueError",
    "UserEntity",
    "UserListFilter",
    "UserListFilterKind",
    "is_owner_of",
    "parse_entity_ref",
    "stringify_entity_ref",
]
