"""Categories router for listing categories and filtering videos by them."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from streambox.dependencies import get_current_admin, get_store
from streambox.exceptions import NotFoundError
from streambox.models.user import User
from streambox.schemas.category import CategoryCreate, CategoryResponse
from streambox.schemas.video import VideoResponse
from streambox.services.catalog_service import TRENDING_SLUG, CatalogStore

router = APIRouter(prefix="/categories")


@router.get("", response_model=List[CategoryResponse])
async def get_categories(store: Annotated[CatalogStore, Depends(get_store)]):
    """
    Get all categories with their video counts.

    The trending category counts every video, since it applies no filter.
    """
    videos = store.list_videos()

    counts: dict[int, int] = {}
    for video in videos:
        counts[video.category_id] = counts.get(video.category_id, 0) + 1

    result = []
    for category in store.list_categories():
        result.append(
            {
                "id": category.id,
                "name": category.name,
                "icon": category.icon,
                "slug": category.slug,
                "video_count": (
                    len(videos)
                    if category.slug == TRENDING_SLUG
                    else counts.get(category.id, 0)
                ),
            }
        )

    return result


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryCreate,
    store: Annotated[CatalogStore, Depends(get_store)],
    admin: Annotated[User, Depends(get_current_admin)],
):
    """Add a category (administrators only). Slugs must be unique."""
    return store.create_category(payload)


@router.get("/{category_id}/videos", response_model=List[VideoResponse])
async def get_category_videos(
    category_id: int,
    store: Annotated[CatalogStore, Depends(get_store)],
):
    """Get the videos of a category by its ID."""
    if store.find_category_by_id(category_id) is None:
        raise NotFoundError("Category not found")

    return store.list_videos_by_category(category_id)


@router.get("/slug/{slug}/videos", response_model=List[VideoResponse])
async def get_category_videos_by_slug(
    slug: str,
    store: Annotated[CatalogStore, Depends(get_store)],
):
    """
    Get the videos of a category by its slug.

    The reserved slug "trending" returns the whole catalog.
    """
    videos = store.list_videos_by_slug(slug)

    if videos is None:
        raise NotFoundError("Category not found")

    return videos
