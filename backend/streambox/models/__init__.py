from streambox.models.user import User
from streambox.models.video import Video
from streambox.models.category import Category
from streambox.models.like import video_likes
from streambox.models.counter import IdCounter

__all__ = [
    "User",
    "Video",
    "Category",
    "IdCounter",
    "video_likes",
]
