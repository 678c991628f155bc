"""
Catalog entity data model and entity references.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .config import get_settings
from .constants import KIND_USER
from .exceptions import InvalidEntityRefError


@dataclass(frozen=True)
class EntityRef:
    """Compound reference to an entity: ``kind:namespace/name``."""

    kind: str
    namespace: str
    name: str

    def __str__(self) -> str:
        return stringify_entity_ref(self)

    def normalized(self) -> str:
        """Lower-cased string form used when comparing references."""
        return stringify_entity_ref(self).lower()


def parse_entity_ref(
    ref: Any, default_kind: Optional[str] = None, default_namespace: Optional[str] = None
) -> EntityRef:
    """Parse an entity reference string.

    Accepts ``kind:namespace/name``, ``kind:name``, ``namespace/name`` and
    ``name``, filling missing parts from the defaults.

    Args:
        ref: The reference string, or a mapping with kind/namespace/name keys
        default_kind: Kind to use when the reference has none
        default_namespace: Namespace to use when the reference has none;
            falls back to the configured default namespace

    Returns:
        The parsed EntityRef

    Raises:
        InvalidEntityRefError: If the reference is malformed or has no kind
    """
    if default_namespace is None:
        default_namespace = get_settings().default_namespace

    if isinstance(ref, dict):
        kind = ref.get("kind") or default_kind
        namespace = ref.get("namespace") or default_namespace
        name = ref.get("name")
        if not kind or not name:
            raise InvalidEntityRefError(f"Entity reference {ref!r} is missing kind or name", ref=ref)
        return EntityRef(kind=kind, namespace=namespace, name=name)

    if not isinstance(ref, str) or not ref.strip():
        raise InvalidEntityRefError(f"Entity reference must be a non-empty string, got {ref!r}", ref=ref)

    kind_part, sep, rest = ref.partition(":")
    if not sep:
        kind_part, rest = "", ref
    namespace_part, sep, name_part = rest.partition("/")
    if not sep:
        namespace_part, name_part = "", rest

    kind = kind_part or default_kind
    namespace = namespace_part or default_namespace
    if not kind:
        raise InvalidEntityRefError(f"Entity reference {ref!r} had no kind and no default kind was given", ref=ref)
    if not name_part or "/" in name_part or ":" in name_part:
        raise InvalidEntityRefError(f"Entity reference {ref!r} has an invalid name", ref=ref)

    return EntityRef(kind=kind, namespace=namespace, name=name_part)


def stringify_entity_ref(ref: EntityRef) -> str:
    """Format a reference as ``kind:namespace/name`` with kind and namespace lower-cased."""
    return f"{ref.kind.lower()}:{ref.namespace.lower()}/{ref.name}"


@dataclass(frozen=True)
class EntityRelation:
    """Directed relation from an entity to another entity."""

    type: str
    target_ref: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EntityRelation":
        """Create a relation from catalog JSON, accepting ``targetRef`` or a compound ``target``."""
        target_ref = data.get("targetRef")
        if not target_ref:
            target = data.get("target")
            if not isinstance(target, dict):
                raise InvalidEntityRefError(f"Relation {data!r} has no target", ref=target)
            target_ref = str(parse_entity_ref(target))
        return cls(type=data["type"], target_ref=target_ref)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "targetRef": self.target_ref}


@dataclass(frozen=True)
class EntityMeta:
    """Entity metadata."""

    name: str
    namespace: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EntityMeta":
        return cls(
            name=data["name"],
            namespace=data.get("namespace"),
            title=data.get("title"),
            description=data.get("description"),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
            tags=tuple(data.get("tags") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        for key in ("namespace", "title", "description"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.labels:
            result["labels"] = dict(self.labels)
        if self.annotations:
            result["annotations"] = dict(self.annotations)
        if self.tags:
            result["tags"] = list(self.tags)
        return result


@dataclass(frozen=True)
class Entity:
    """Catalog entity as returned by the catalog API."""

    api_version: str
    kind: str
    metadata: EntityMeta
    spec: dict[str, Any] = field(default_factory=dict)
    relations: tuple[EntityRelation, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entity":
        """Create an Entity from catalog JSON."""
        return cls(
            api_version=data.get("apiVersion", ""),
            kind=data["kind"],
            metadata=EntityMeta.from_dict(data["metadata"]),
            spec=dict(data.get("spec") or {}),
            relations=tuple(EntityRelation.from_dict(r) for r in data.get("relations") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": self.metadata.to_dict(),
        }
        if self.spec:
            result["spec"] = dict(self.spec)
        if self.relations:
            result["relations"] = [r.to_dict() for r in self.relations]
        return result

    @property
    def tags(self) -> tuple[str, ...]:
        return self.metadata.tags

    @property
    def compound_ref(self) -> EntityRef:
        namespace = self.metadata.namespace or get_settings().default_namespace
        return EntityRef(kind=self.kind, namespace=namespace, name=self.metadata.name)

    @property
    def ref(self) -> str:
        return stringify_entity_ref(self.compound_ref)


# A viewer is a User entity; the alias documents intent at call sites.
UserEntity = Entity


def is_user_entity(entity: Optional[Entity]) -> bool:
    """Return True if the entity is a User entity."""
    return entity is not None and entity.kind.lower() == KIND_USER.lower()
