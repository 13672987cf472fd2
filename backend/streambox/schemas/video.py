from datetime import datetime
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from streambox.schemas.category import CategoryResponse


class VideoBase(BaseModel):
    """Base video schema."""

    title: str
    description: str
    thumbnail_url: str
    video_url: str
    duration: int  # in seconds
    category_id: int
    tags: list[str] = []
    is_popular: bool = False
    is_featured: bool = False


class VideoCreate(VideoBase):
    """Schema for creating a video. Missing type falls back to the configured default."""

    duration: int = Field(..., ge=0)
    type: str | None = None

    @field_validator("title", "description")
    @classmethod
    def must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("thumbnail_url", "video_url")
    @classmethod
    def must_be_absolute_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("must be an absolute http(s) URL")
        return value


class VideoResponse(VideoBase):
    """Video response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    views: int
    likes: int
    uploaded_by: str
    uploaded_at: datetime


class VideoFeaturedUpdate(BaseModel):
    """Schema for toggling the featured flag."""

    is_featured: bool


class CategoryRow(BaseModel):
    """One home-page row: a category and its videos."""

    category: CategoryResponse
    videos: list[VideoResponse]


class LikedVideosResponse(BaseModel):
    """Videos liked by the current user, in like order."""

    video_ids: list[int]
    videos: list[VideoResponse]
