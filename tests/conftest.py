"""Shared fixtures for catalog filter tests."""

import pytest

from catalog_filters.model import Entity


def make_entity(
    name: str,
    kind: str = "Component",
    spec_type: str = "service",
    tags: tuple = (),
    owners: tuple = (),
    namespace: str = "default",
) -> dict:
    """Build raw catalog JSON for an entity."""
    data = {
        "apiVersion": "backstage.io/v1alpha1",
        "kind": kind,
        "metadata": {"name": name, "namespace": namespace},
        "spec": {"type": spec_type, "lifecycle": "production"},
        "relations": [{"type": "ownedBy", "targetRef": owner} for owner in owners],
    }
    if tags:
        data["metadata"]["tags"] = list(tags)
    return data


@pytest.fixture
def raw_entities() -> list[dict]:
    return [
        make_entity("checkout", tags=("java", "payments"), owners=("group:default/team-a",)),
        make_entity("storefront", spec_type="website", tags=("react",), owners=("user:default/alice",)),
        make_entity("billing", tags=("java",), owners=("group:default/team-b",)),
        make_entity("orders-api", kind="API", spec_type="openapi", owners=("group:default/team-a",)),
    ]


@pytest.fixture
def entities(raw_entities) -> list[Entity]:
    return [Entity.from_dict(item) for item in raw_entities]


@pytest.fixture
def alice() -> Entity:
    return Entity.from_dict(
        {
            "apiVersion": "backstage.io/v1alpha1",
            "kind": "User",
            "metadata": {"name": "alice"},
            "spec": {"memberOf": ["team-a"]},
            "relations": [{"type": "memberOf", "targetRef": "group:default/team-a"}],
        }
    )


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep tests independent of any local .env settings."""
    monkeypatch.delenv("CATALOG_FILTERS_DEFAULT_NAMESPACE", raising=False)
    monkeypatch.delenv("CATALOG_FILTERS_STRICT_USER_LIST", raising=False)


@pytest.fixture
def entity_factory():
    """Build parsed entities with the same defaults as the raw fixtures."""

    def factory(name: str, **kwargs) -> Entity:
        return Entity.from_dict(make_entity(name, **kwargs))

    return factory
