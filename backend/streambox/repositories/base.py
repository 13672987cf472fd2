"""Abstract repository interface for catalog storage."""

from abc import ABC, abstractmethod

from streambox.models.category import Category
from streambox.models.user import User
from streambox.models.video import Video


class CatalogRepository(ABC):
    """Storage contract behind the catalog store.

    Implementations own persistence and id assignment only. Filtering,
    search and validation live in the store so a different backend can be
    swapped in without touching query or recommendation logic.
    """

    @abstractmethod
    def next_id(self, sequence: str) -> int:
        """Issue the next id for a named sequence. Ids are never reissued."""

    # Categories

    @abstractmethod
    def add_category(self, category: Category) -> Category:
        """Persist a new category."""

    @abstractmethod
    def get_category(self, category_id: int) -> Category | None:
        """Look up a category by id."""

    @abstractmethod
    def get_category_by_slug(self, slug: str) -> Category | None:
        """Look up a category by slug."""

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories in id order."""

    # Videos

    @abstractmethod
    def add_video(self, video: Video) -> Video:
        """Persist a new video."""

    @abstractmethod
    def get_video(self, video_id: int) -> Video | None:
        """Look up a video by id."""

    @abstractmethod
    def list_videos(self) -> list[Video]:
        """List all videos in insertion order."""

    @abstractmethod
    def delete_video(self, video_id: int) -> bool:
        """Hard-delete a video and its likes. Returns False if it did not exist."""

    @abstractmethod
    def increment_views(self, video_id: int) -> Video | None:
        """Atomically add one view. Returns the updated video."""

    @abstractmethod
    def set_featured(self, video_id: int, featured: bool) -> Video | None:
        """Set the featured flag. Returns the updated video."""

    # Likes

    @abstractmethod
    def set_like(self, user_id: int, video_id: int, liked: bool) -> bool:
        """Add or remove a like and adjust the video's counter in one step.

        Returns True when membership changed, False when it already matched.
        """

    @abstractmethod
    def liked_video_ids(self, user_id: int) -> list[int]:
        """Ids of videos liked by a user, oldest like first."""

    # Users

    @abstractmethod
    def add_user(self, user: User) -> User:
        """Persist a new user."""

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        """Look up a user by username."""

    @abstractmethod
    def reset(self) -> None:
        """Remove every record and restart all sequences."""
