from streambox.schemas.user import UserCredentials, UserCreate, UserResponse
from streambox.schemas.category import CategoryBase, CategoryCreate, CategoryResponse
from streambox.schemas.video import (
    VideoBase,
    VideoCreate,
    VideoResponse,
    VideoFeaturedUpdate,
    CategoryRow,
    LikedVideosResponse,
)

__all__ = [
    "UserCredentials",
    "UserCreate",
    "UserResponse",
    "CategoryBase",
    "CategoryCreate",
    "CategoryResponse",
    "VideoBase",
    "VideoCreate",
    "VideoResponse",
    "VideoFeaturedUpdate",
    "CategoryRow",
    "LikedVideosResponse",
]
