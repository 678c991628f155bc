"""Ownership resolution between viewers and catalog entities."""

import logging
from typing import Optional

from .constants import KIND_GROUP, RELATION_MEMBER_OF, RELATION_OWNED_BY
from .exceptions import InvalidEntityRefError
from .model import Entity, EntityRef, parse_entity_ref

logger = logging.getLogger(__name__)


def get_entity_relations(entity: Optional[Entity], relation_type: str, kind: Optional[str] = None) -> list[EntityRef]:
    """Get the targets of an entity's relations of a given type.

    Args:
        entity: The entity to inspect; None yields no relations
        relation_type: Relation type to select, e.g. ``ownedBy``
        kind: Only keep targets of this kind (case-insensitive)

    Returns:
        Parsed references to the relation targets; targets that are not
        valid entity references are skipped
    """
    if entity is None:
        return []

    refs = []
    for relation in entity.relations:
        if relation.type != relation_type:
            continue
        try:
            refs.append(parse_entity_ref(relation.target_ref))
        except InvalidEntityRefError as e:
            logger.warning(f"Skipping {relation_type} relation of {entity.ref}: {e}")
    if kind:
        refs = [ref for ref in refs if ref.kind.lower() == kind.lower()]
    return refs


def is_owner_of(owner: Entity, owned: Entity) -> bool:
    """Check whether a user (or any group it is a member of) owns an entity.

    Args:
        owner: The viewer, normally a User entity
        owned: The entity whose ``ownedBy`` relations are checked

    Returns:
        True if any owner of ``owned`` is the viewer or one of its groups
    """
    possible_owners = {ref.normalized() for ref in get_entity_relations(owner, RELATION_MEMBER_OF, kind=KIND_GROUP)}
    possible_owners.add(owner.compound_ref.normalized())

    for ref in get_entity_relations(owned, RELATION_OWNED_BY):
        if ref.normalized() in possible_owners:
            return True

    logger.debug(f"{owner.ref} does not own {owned.ref}")
    return False
