"""Search router for free-text catalog queries."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query

from streambox.dependencies import get_store
from streambox.exceptions import ValidationError
from streambox.schemas.video import VideoResponse
from streambox.services.catalog_service import CatalogStore

router = APIRouter(prefix="/search")


@router.get("", response_model=List[VideoResponse])
async def search_videos(
    store: Annotated[CatalogStore, Depends(get_store)],
    q: str | None = Query(None, description="Search query"),
):
    """
    Case-insensitive search across video titles, descriptions and tags.

    Args:
        q: Search query string; required and not blank
    """
    if not q or not q.strip():
        raise ValidationError("Search query is required")

    return store.search_videos(q)
