"""
Concrete entity filters: kind, type, tags and user list.
"""

import logging
from collections.abc import Iterable
from typing import Optional, Union

from ..config import get_settings
from ..constants import KIND_FIELD, SPEC_TYPE_FIELD
from ..exceptions import InvalidFilterValueError
from ..model import Entity
from .types import CatalogFilters, EntityFilter, FilterEnvironment, FilterVariant, UserListFilterKind

logger = logging.getLogger(__name__)


class EntityKindFilter(EntityFilter):
    """Restricts the catalog request to one entity kind."""

    variant = FilterVariant.KIND

    def __init__(self, kind: str):
        self._value = kind

    @property
    def value(self) -> str:
        return self._value

    def get_catalog_filters(self) -> CatalogFilters:
        return {KIND_FIELD: self._value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityKindFilter):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((EntityKindFilter, self._value))

    def __repr__(self) -> str:
        return f"EntityKindFilter({self._value!r})"


class EntityTypeFilter(EntityFilter):
    """Restricts the catalog request to one ``spec.type``.

    Unlike the other filters the value can be changed in place with
    ``update``. Anything memoized on the identity of this filter must be
    invalidated after an update.
    """

    variant = FilterVariant.TYPE

    def __init__(self, type: str):
        self._value = type

    @property
    def value(self) -> str:
        return self._value

    def update(self, value: str) -> None:
        """Replace the type this filter restricts to."""
        logger.debug(f"Updating type filter from {self._value!r} to {value!r}")
        self._value = value

    def get_catalog_filters(self) -> CatalogFilters:
        return {SPEC_TYPE_FIELD: self.value}

    def __repr__(self) -> str:
        return f"EntityTypeFilter({self._value!r})"


class EntityTagFilter(EntityFilter):
    """Keeps entities carrying every one of the given tags."""

    variant = FilterVariant.TAG

    def __init__(self, values: Iterable[str]):
        self._values = tuple(values)

    @property
    def values(self) -> tuple[str, ...]:
        return self._values

    def filter_entity(self, entity: Entity, env: Optional[FilterEnvironment] = None) -> bool:
        tags = entity.tags
        return all(v in tags for v in self._values)

    def __repr__(self) -> str:
        return f"EntityTagFilter({list(self._values)!r})"


class UserListFilter(EntityFilter):
    """Keeps entities owned or starred by the viewer, or all of them.

    An unrecognised value behaves like ``all`` and is logged, unless strict
    user list checking is enabled in the settings.
    """

    variant = FilterVariant.USER_LIST

    def __init__(self, value: Union[UserListFilterKind, str]):
        try:
            self._value = UserListFilterKind(value)
        except ValueError:
            if get_settings().strict_user_list:
                raise InvalidFilterValueError(
                    f"Unknown user list filter {value!r}",
                    details={"value": value, "allowed": [k.value for k in UserListFilterKind]},
                ) from None
            logger.warning(f"Unknown user list filter {value!r}, treating it as 'all'")
            self._value = UserListFilterKind.ALL

    @property
    def value(self) -> UserListFilterKind:
        return self._value

    def filter_entity(self, entity: Entity, env: FilterEnvironment) -> bool:
        if self._value == UserListFilterKind.OWNED:
            return env.user is not None and env.is_owner_of(env.user, entity)
        if self._value == UserListFilterKind.STARRED:
            return env.is_starred_entity(entity)
        return True

    def __repr__(self) -> str:
        return f"UserListFilter({self._value.value!r})"
