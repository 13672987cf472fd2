"""In-process catalog repository backed by dictionaries."""

import threading
from datetime import datetime, timezone

from streambox.models.category import Category
from streambox.models.user import User
from streambox.models.video import Video
from streambox.repositories.base import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):
    """Holds transient model instances in memory for the process lifetime."""

    def __init__(self):
        self._lock = threading.RLock()
        self._counters: dict[str, int] = {}
        self._categories: dict[int, Category] = {}
        self._videos: dict[int, Video] = {}
        self._users: dict[int, User] = {}
        # (user_id, video_id) -> liked_at
        self._likes: dict[tuple[int, int], datetime] = {}

    def next_id(self, sequence: str) -> int:
        with self._lock:
            value = self._counters.get(sequence, 0) + 1
            self._counters[sequence] = value
            return value

    def add_category(self, category: Category) -> Category:
        with self._lock:
            self._categories[category.id] = category
        return category

    def get_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> Category | None:
        with self._lock:
            for category in self._categories.values():
                if category.slug == slug:
                    return category
            return None

    def list_categories(self) -> list[Category]:
        with self._lock:
            return list(self._categories.values())

    def add_video(self, video: Video) -> Video:
        with self._lock:
            self._videos[video.id] = video
        return video

    def get_video(self, video_id: int) -> Video | None:
        return self._videos.get(video_id)

    def list_videos(self) -> list[Video]:
        with self._lock:
            return list(self._videos.values())

    def delete_video(self, video_id: int) -> bool:
        with self._lock:
            if self._videos.pop(video_id, None) is None:
                return False
            for key in [key for key in self._likes if key[1] == video_id]:
                del self._likes[key]
            return True

    def increment_views(self, video_id: int) -> Video | None:
        with self._lock:
            video = self._videos.get(video_id)
            if video is None:
                return None
            video.views += 1
            return video

    def set_featured(self, video_id: int, featured: bool) -> Video | None:
        with self._lock:
            video = self._videos.get(video_id)
            if video is None:
                return None
            video.is_featured = featured
            return video

    def set_like(self, user_id: int, video_id: int, liked: bool) -> bool:
        with self._lock:
            video = self._videos.get(video_id)
            if video is None:
                return False

            key = (user_id, video_id)
            if liked:
                if key in self._likes:
                    return False
                self._likes[key] = datetime.now(timezone.utc)
                video.likes += 1
            else:
                if key not in self._likes:
                    return False
                del self._likes[key]
                video.likes = max(0, video.likes - 1)
            return True

    def liked_video_ids(self, user_id: int) -> list[int]:
        # dicts keep insertion order, which is like order
        with self._lock:
            return [video_id for (uid, video_id) in self._likes if uid == user_id]

    def add_user(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = user
        return user

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user
            return None

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._categories.clear()
            self._videos.clear()
            self._users.clear()
            self._likes.clear()
