"""Common exceptions for the catalog-filters package."""

from typing import Optional


class CatalogFilterError(Exception):
    """Base class for catalog filtering errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class InvalidEntityRefError(CatalogFilterError):
    """Raised when an entity reference cannot be parsed."""

    def __init__(self, message: str, ref: object = None) -> None:
        super().__init__(message, error_code="invalid_entity_ref", details={"ref": ref})
        self.ref = ref


class InvalidFilterValueError(CatalogFilterError):
    """Raised when a filter value or catalog filter fragment is rejected."""

    def __init__(self, message: str, error_code: str = "invalid_filter_value", details: Optional[dict] = None) -> None:
        super().__init__(message, error_code=error_code, details=details)


class CatalogQueryError(CatalogFilterError):
    """Raised when catalog filters cannot be evaluated over raw entity data."""

    def __init__(self, message: str, query: Optional[str] = None) -> None:
        super().__init__(message, error_code="catalog_query_failed", details={"query": query})
        self.query = query
