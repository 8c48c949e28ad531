"""Catalog exceptions.

Custom exception hierarchy shared by the query pipeline, the tool stores
and the HTTP layer.
"""


class CatalogError(Exception):
    """Base exception for the catalog."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CatalogValidationError(CatalogError):
    """Malformed input supplied by the caller."""

    status_code = 400


class InvalidCategoryError(CatalogValidationError):
    """Category filter outside the fixed enumeration."""

    pass


class InvalidQueryError(CatalogValidationError):
    """Empty search term, unknown sort key or bad page parameters."""

    pass


class InvalidToolIdError(CatalogValidationError):
    """Tool id is not a positive integer."""

    pass


class DuplicateUsernameError(CatalogValidationError):
    """Username already taken."""

    pass


class ToolNotFoundError(CatalogError):
    """Valid tool id with no matching record."""

    status_code = 404


class StoreUnavailableError(CatalogError):
    """Storage backend failed (connection refused, query error, ...)."""

    status_code = 500
