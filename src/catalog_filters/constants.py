"""Constants and configuration defaults for catalog entity filtering."""

# Catalog field paths produced by the built-in filters
KIND_FIELD = "kind"
SPEC_TYPE_FIELD = "spec.type"

# Query parameter the catalog API reads filter fragments from
FILTER_QUERY_PARAM = "filter"

# Entity reference defaults
DEFAULT_NAMESPACE = "default"

# Well-known entity kinds
KIND_USER = "User"
KIND_GROUP = "Group"

# Relation types used by the ownership test
RELATION_OWNED_BY = "ownedBy"
RELATION_MEMBER_OF = "memberOf"

# Environment variables read by config.FilterSettings
ENV_DEFAULT_NAMESPACE = "CATALOG_FILTERS_DEFAULT_NAMESPACE"
ENV_STRICT_USER_LIST = "CATALOG_FILTERS_STRICT_USER_LIST"

# Accepted truthy spellings for boolean environment variables
TRUTHY_VALUES = {"1", "true", "yes", "on"}

