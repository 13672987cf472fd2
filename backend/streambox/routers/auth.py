"""Authentication router for the username-based identity scheme."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from streambox.dependencies import get_store
from streambox.exceptions import AuthorizationError
from streambox.schemas.user import UserCredentials, UserResponse
from streambox.services.catalog_service import CatalogStore

router = APIRouter(prefix="/auth")


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    payload: UserCredentials,
    store: Annotated[CatalogStore, Depends(get_store)],
):
    """
    Create a regular (non-admin) account.

    Clients identify themselves afterwards with the x-username header.
    """
    return store.create_user(
        {"username": payload.username, "password": payload.password}
    )


@router.post("/login", response_model=UserResponse)
async def login(
    payload: UserCredentials,
    store: Annotated[CatalogStore, Depends(get_store)],
):
    """Check credentials and return the user's profile, including the admin flag."""
    user = store.authenticate(payload.username, payload.password)

    if not user:
        raise AuthorizationError("Invalid username or password", status_code=401)

    return user
