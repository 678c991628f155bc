"""
Filter contract shared by every catalog entity filter.

A filter narrows a list of catalog entities in up to two ways:

- ``get_catalog_filters()`` returns field/value constraints that are added to
  the catalog request, so the backend only returns matching entities.
- ``filter_entity(entity, env)`` is evaluated on the client for every entity
  the backend returned. It is used for conditions that need viewer-relative
  information, such as starred entities or ownership.

Either capability may be absent (``None``). A filter without
``filter_entity`` trusts its catalog filters to be exact; a filter without
``get_catalog_filters`` is evaluated entirely on the client.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional, Union

from ..model import Entity, UserEntity, is_user_entity, parse_entity_ref
from ..ownership import is_owner_of as default_is_owner_of
from ..utils.validators import validate_entity_ref

logger = logging.getLogger(__name__)

CatalogFilters = dict[str, Union[str, list[str]]]


class FilterVariant(str, Enum):
    """Closed set of filter variants."""

    KIND = "kind"
    TYPE = "type"
    TAG = "tag"
    USER_LIST = "user_list"


class UserListFilterKind(str, Enum):
    """Which viewer-relative list of entities to show."""

    OWNED = "owned"
    STARRED = "starred"
    ALL = "all"


def _never_starred(entity: Entity) -> bool:
    return False


@dataclass(frozen=True)
class FilterEnvironment:
    """Per-pass context handed to ``filter_entity``.

    ``user`` is None for anonymous viewers. The starred and ownership tests
    are supplied by the caller and are expected to be side-effect free.
    """

    user: Optional[UserEntity] = None
    is_starred_entity: Callable[[Entity], bool] = _never_starred
    is_owner_of: Callable[[UserEntity, Entity], bool] = default_is_owner_of

    def __post_init__(self) -> None:
        if self.user is not None and not is_user_entity(self.user):
            logger.warning(f"Viewer {self.user.ref} is a {self.user.kind} entity, not a User")

    @classmethod
    def create(
        cls,
        user: Optional[UserEntity] = None,
        starred_refs: Iterable[str] = (),
        is_owner_of: Optional[Callable[[UserEntity, Entity], bool]] = None,
    ) -> "FilterEnvironment":
        """Build an environment whose starred test checks membership in ``starred_refs``."""
        starred = set()
        for ref in starred_refs:
            if not validate_entity_ref(ref):
                logger.warning(f"Ignoring invalid starred entity reference: {ref!r}")
                continue
            starred.add(parse_entity_ref(ref).normalized())

        def is_starred_entity(entity: Entity) -> bool:
            return entity.compound_ref.normalized() in starred

        return cls(
            user=user,
            is_starred_entity=is_starred_entity,
            is_owner_of=is_owner_of or default_is_owner_of,
        )


class EntityFilter:
    """Base class for entity filters.

    Subclasses supply ``get_catalog_filters`` and/or ``filter_entity`` as
    methods; a capability left as ``None`` is not provided. An instance of
    this class itself provides neither and is a no-op filter.
    """

    variant: ClassVar[Optional[FilterVariant]] = None

    get_catalog_filters: Optional[Callable[[], CatalogFilters]] = None
    filter_entity: Optional[Callable[[Entity, FilterEnvironment], bool]] = None

    @property
    def supports_catalog_filters(self) -> bool:
        return self.get_catalog_filters is not None

    @property
    def supports_entity_filter(self) -> bool:
        return self.filter_entity is not None
