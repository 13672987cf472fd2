"""Users router for the caller's own likes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from streambox.dependencies import get_store, get_username
from streambox.exceptions import NotFoundError
from streambox.schemas.video import LikedVideosResponse, VideoResponse
from streambox.services.catalog_service import CatalogStore

router = APIRouter(prefix="/users")


@router.get("/me/likes", response_model=LikedVideosResponse)
async def get_my_likes(
    store: Annotated[CatalogStore, Depends(get_store)],
    username: Annotated[str, Depends(get_username)],
):
    """Get the ids and records of videos liked by the current user."""
    video_ids = store.liked_video_ids(username)

    if video_ids is None:
        raise NotFoundError("User not found")

    videos = []
    for video_id in video_ids:
        video = store.find_video(video_id)
        if video is not None:
            videos.append(VideoResponse.model_validate(video))

    return LikedVideosResponse(video_ids=video_ids, videos=videos)
