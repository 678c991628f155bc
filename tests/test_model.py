"""Tests for the entity model and entity references."""

import pytest

from catalog_filters.exceptions import InvalidEntityRefError
from catalog_filters.model import Entity, EntityRef, EntityRelation, is_user_entity, parse_entity_ref


class TestParseEntityRef:
    """Test entity reference parsing."""

    def test_full_reference(self):
        """Test kind:namespace/name."""
        assert parse_entity_ref("component:prod/checkout") == EntityRef("component", "prod", "checkout")

    def test_defaults(self):
        """Test missing kind and namespace are filled in."""
        assert parse_entity_ref("component:checkout") == EntityRef("component", "default", "checkout")
        assert parse_entity_ref("prod/checkout", default_kind="group") == EntityRef("group", "prod", "checkout")
        assert parse_entity_ref("alice", default_kind="user") == EntityRef("user", "default", "alice")

    def test_configured_default_namespace(self, monkeypatch):
        """Test the default namespace comes from the settings."""
        monkeypatch.setenv("CATALOG_FILTERS_DEFAULT_NAMESPACE", "acme")
        assert parse_entity_ref("user:alice").namespace == "acme"

    def test_compound_mapping(self):
        """Test a compound reference mapping."""
        ref = parse_entity_ref({"kind": "Group", "name": "team-a"})
        assert ref == EntityRef("Group", "default", "team-a")

    @pytest.mark.parametrize("ref", ["", "   ", None, 42, "checkout", "component:", "component:a/b/c"])
    def test_invalid_references(self, ref):
        """Test malformed references are rejected."""
        with pytest.raises(InvalidEntityRefError) as exc_info:
            parse_entity_ref(ref)
        assert exc_info.value.error_code == "invalid_entity_ref"

    def test_stringify_lowercases_kind_and_namespace(self):
        """Test the string form."""
        assert str(EntityRef("Component", "Prod", "Checkout")) == "component:prod/Checkout"
        assert EntityRef("Component", "Prod", "Checkout").normalized() == "component:prod/checkout"


class TestEntity:
    """Test entity parsing."""

    def test_from_dict(self, raw_entities):
        """Test catalog JSON is parsed."""
        entity = Entity.from_dict(raw_entities[0])

        assert entity.kind == "Component"
        assert entity.metadata.name == "checkout"
        assert entity.tags == ("java", "payments")
        assert entity.spec["type"] == "service"
        assert entity.relations == (EntityRelation("ownedBy", "group:default/team-a"),)
        assert entity.ref == "component:default/checkout"

    def test_to_dict_round_trips_catalog_json(self, raw_entities):
        """Test serialization keeps the catalog shape."""
        assert Entity.from_dict(raw_entities[1]).to_dict() == raw_entities[1]

    def test_untagged_entity(self, raw_entities):
        """Test missing tags become an empty tuple."""
        assert Entity.from_dict(raw_entities[3]).tags == ()

    def test_relation_with_compound_target(self):
        """Test relations given with a compound target."""
        relation = EntityRelation.from_dict(
            {"type": "ownedBy", "target": {"kind": "group", "namespace": "default", "name": "team-a"}}
        )
        assert relation.target_ref == "group:default/team-a"

    def test_relation_without_target(self):
        """Test relations without any target are rejected."""
        with pytest.raises(InvalidEntityRefError):
            EntityRelation.from_dict({"type": "ownedBy"})

    def test_is_user_entity(self, alice, entities):
        """Test user detection."""
        assert is_user_entity(alice) is True
        assert is_user_entity(entities[0]) is False
        assert is_user_entity(None) is False
