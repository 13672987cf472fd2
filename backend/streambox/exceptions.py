"""Error taxonomy shared by the catalog store and the HTTP layer."""

from typing import Any


class CatalogError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(CatalogError):
    """A lookup by id or slug matched nothing."""

    status_code = 404


class ValidationError(CatalogError):
    """Malformed or constraint-violating input to a query or mutation."""

    status_code = 400

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class AuthorizationError(CatalogError):
    """Missing identity (401) or insufficient privilege (403)."""

    status_code = 403
