"""Videos router for browsing, watching and administering the catalog."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from streambox.dependencies import (
    get_current_admin,
    get_recommendation_limit,
    get_recommendation_service,
    get_store,
    get_username,
)
from streambox.exceptions import NotFoundError
from streambox.logger import api_logger
from streambox.models.user import User
from streambox.schemas.category import CategoryResponse
from streambox.schemas.video import (
    CategoryRow,
    VideoCreate,
    VideoFeaturedUpdate,
    VideoResponse,
)
from streambox.services.catalog_service import CatalogStore
from streambox.services.recommendation_service import RecommendationService

router = APIRouter(prefix="/videos")


@router.get("", response_model=list[VideoResponse])
async def list_videos(
    store: Annotated[CatalogStore, Depends(get_store)],
    video_type: str | None = Query(
        None, alias="type", description="Only videos of this type, e.g. movie"
    ),
):
    """Get every video in the catalog, optionally filtered by type."""
    if video_type is not None:
        return store.list_videos_by_type(video_type)
    return store.list_videos()


@router.get("/featured", response_model=list[VideoResponse])
async def list_featured_videos(store: Annotated[CatalogStore, Depends(get_store)]):
    """Get videos flagged as featured by an administrator."""
    return store.list_featured_videos()


@router.get("/browse", response_model=list[CategoryRow])
async def browse_videos(store: Annotated[CatalogStore, Depends(get_store)]):
    """
    Get the catalog grouped into one row per category for the home page.

    The reserved trending category and categories without videos are omitted.
    """
    rows = []
    for category, videos in store.browse_by_category():
        rows.append(
            CategoryRow(
                category=CategoryResponse(
                    id=category.id,
                    name=category.name,
                    icon=category.icon,
                    slug=category.slug,
                    video_count=len(videos),
                ),
                videos=[VideoResponse.model_validate(video) for video in videos],
            )
        )
    return rows


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: int,
    store: Annotated[CatalogStore, Depends(get_store)],
):
    """Get a specific video by ID. Each fetch counts as one view."""
    video = store.record_view(video_id)

    if not video:
        raise NotFoundError("Video not found")

    return video


@router.get("/{video_id}/recommendations", response_model=list[VideoResponse])
async def get_recommendations(
    video_id: int,
    store: Annotated[CatalogStore, Depends(get_store)],
    recommender: Annotated[RecommendationService, Depends(get_recommendation_service)],
    limit: Annotated[int | None, Depends(get_recommendation_limit)],
):
    """
    Get videos related to a specific video.

    Does not count as a view of the reference video.
    """
    video = store.find_video(video_id)

    if not video:
        raise NotFoundError("Video not found")

    return recommender.recommend(video, store.list_videos(), limit=limit)


@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def create_video(
    payload: VideoCreate,
    store: Annotated[CatalogStore, Depends(get_store)],
    admin: Annotated[User, Depends(get_current_admin)],
):
    """Add a video to the catalog (administrators only)."""
    if store.find_category_by_id(payload.category_id) is None:
        raise NotFoundError("Category not found")

    return store.create_video(payload, uploaded_by=admin.username)


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: int,
    store: Annotated[CatalogStore, Depends(get_store)],
    admin: Annotated[User, Depends(get_current_admin)],
):
    """Permanently remove a video (administrators only)."""
    if not store.delete_video(video_id):
        raise NotFoundError("Video not found")

    api_logger.info(f"Video {video_id} removed by {admin.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{video_id}/featured", response_model=VideoResponse)
async def set_video_featured(
    video_id: int,
    payload: VideoFeaturedUpdate,
    store: Annotated[CatalogStore, Depends(get_store)],
    admin: Annotated[User, Depends(get_current_admin)],
):
    """Feature or unfeature a video (administrators only)."""
    video = store.set_featured(video_id, payload.is_featured)

    if not video:
        raise NotFoundError("Video not found")

    return video


@router.post("/{video_id}/like", response_model=VideoResponse)
async def like_video(
    video_id: int,
    store: Annotated[CatalogStore, Depends(get_store)],
    username: Annotated[str, Depends(get_username)],
):
    """Like a video. Liking twice has no further effect."""
    return _set_liked(store, username, video_id, liked=True)


@router.delete("/{video_id}/like", response_model=VideoResponse)
async def unlike_video(
    video_id: int,
    store: Annotated[CatalogStore, Depends(get_store)],
    username: Annotated[str, Depends(get_username)],
):
    """Remove a like. Unliking a video that is not liked has no effect."""
    return _set_liked(store, username, video_id, liked=False)


def _set_liked(store: CatalogStore, username: str, video_id: int, liked: bool):
    if store.find_video(video_id) is None:
        raise NotFoundError("Video not found")

    if not store.set_liked(username, video_id, liked):
        raise NotFoundError("User not found")

    return store.find_video(video_id)
