"""FastAPI dependencies for the catalog store and caller identity."""

from typing import Annotated

from fastapi import Depends, Header, Query, Request

from streambox.exceptions import AuthorizationError, ValidationError
from streambox.models.user import User
from streambox.services.catalog_service import CatalogStore
from streambox.services.recommendation_service import RecommendationService


def get_store(request: Request) -> CatalogStore:
    """Dependency for getting the application's catalog store."""
    return request.app.state.store


def get_recommendation_service(request: Request) -> RecommendationService:
    """Dependency for getting the configured recommendation service."""
    return request.app.state.recommendations


def get_recommendation_limit(
    request: Request,
    limit: Annotated[
        int | None, Query(ge=0, description="Maximum number of related videos")
    ] = None,
) -> int | None:
    """Per-request recommendation limit, capped by the app's configured maximum."""
    cap = request.app.state.max_recommendation_limit
    if limit is not None and limit > cap:
        raise ValidationError(
            "Invalid request data",
            errors=[{"loc": ["query", "limit"], "msg": f"limit must not exceed {cap}"}],
        )
    return limit


def get_username(
    x_username: Annotated[str | None, Header(description="Caller's username")] = None,
) -> str:
    """Require the identity header; the username itself is resolved by the route."""
    if not x_username:
        raise AuthorizationError("Authentication required", status_code=401)
    return x_username


def get_current_admin(
    store: Annotated[CatalogStore, Depends(get_store)],
    x_username: Annotated[str | None, Header(description="Caller's username")] = None,
) -> User:
    """Resolve the caller and require administrator privilege."""
    return store.require_admin(x_username)
