"""Catalog store: lookups, filters, search and counter mutations."""

import secrets
import threading
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from streambox.exceptions import AuthorizationError, ValidationError
from streambox.logger import auth_logger, catalog_logger
from streambox.models.category import Category
from streambox.models.user import User
from streambox.models.video import Video
from streambox.repositories.base import CatalogRepository
from streambox.schemas.category import CategoryCreate
from streambox.schemas.user import UserCreate
from streambox.schemas.video import VideoCreate

# Slug meaning "no filter, show everything"
TRENDING_SLUG = "trending"


class CatalogStore:
    """Authoritative holder of videos, categories, users and likes.

    The store owns query semantics and validation; persistence is delegated
    to a CatalogRepository so the backing store can be swapped freely.
    """

    def __init__(self, repository: CatalogRepository, default_video_type: str = "movie"):
        self.repository = repository
        self.default_video_type = default_video_type
        self._lock = threading.RLock()

    # Video queries

    def list_videos(self) -> list[Video]:
        return self.repository.list_videos()

    def list_videos_by_category(self, category_id: int) -> list[Video]:
        return [v for v in self.repository.list_videos() if v.category_id == category_id]

    def list_videos_by_type(self, video_type: str) -> list[Video]:
        return [v for v in self.repository.list_videos() if v.type == video_type]

    def list_videos_by_slug(self, slug: str) -> list[Video] | None:
        """
        Get videos for a category slug.

        Returns:
            Every video for the reserved trending slug, the category's videos
            for a known slug, or None when the slug is unknown
        """
        if slug == TRENDING_SLUG:
            return self.list_videos()

        category = self.repository.get_category_by_slug(slug)
        if category is None:
            return None
        return self.list_videos_by_category(category.id)

    def list_featured_videos(self) -> list[Video]:
        return [v for v in self.repository.list_videos() if v.is_featured]

    def browse_by_category(self) -> list[tuple[Category, list[Video]]]:
        """
        Group the catalog into home-page rows.

        Categories appear in the order their first video appears in the
        catalog. The reserved trending category and empty categories are
        skipped.
        """
        rows: dict[int, list[Video]] = {}
        for video in self.repository.list_videos():
            rows.setdefault(video.category_id, []).append(video)

        result = []
        for category_id, videos in rows.items():
            category = self.repository.get_category(category_id)
            if category is None or category.slug == TRENDING_SLUG:
                continue
            result.append((category, videos))
        return result

    def find_video(self, video_id: int) -> Video | None:
        return self.repository.get_video(video_id)

    def search_videos(self, term: str) -> list[Video]:
        """
        Case-insensitive substring search over title, description and tags.

        Args:
            term: Search text; must contain a non-whitespace character

        Raises:
            ValidationError: If the term is empty or whitespace only
        """
        if term is None or not term.strip():
            raise ValidationError("Search query is required")

        needle = term.lower()
        matches = [
            video
            for video in self.repository.list_videos()
            if needle in video.title.lower()
            or needle in video.description.lower()
            or any(needle in tag.lower() for tag in video.tags)
        ]
        catalog_logger.debug(f"Search {term!r} matched {len(matches)} videos")
        return matches

    # Video mutations

    def create_video(
        self, data: VideoCreate | Mapping[str, Any], uploaded_by: str
    ) -> Video:
        """
        Add a video to the catalog.

        Args:
            data: Video fields, either validated or as a raw mapping
            uploaded_by: Username of the uploading principal

        Returns:
            The stored video with its new id

        Raises:
            ValidationError: On schema violations or an unknown category
        """
        payload = _validate(VideoCreate, data, "Invalid video data")

        with self._lock:
            if self.repository.get_category(payload.category_id) is None:
                raise ValidationError(
                    "Category not found",
                    errors=[
                        {
                            "loc": ["category_id"],
                            "msg": f"Unknown category {payload.category_id}",
                        }
                    ],
                )

            video = Video(
                id=self.repository.next_id("videos"),
                title=payload.title,
                description=payload.description,
                thumbnail_url=payload.thumbnail_url,
                video_url=payload.video_url,
                duration=payload.duration,
                views=0,
                likes=0,
                category_id=payload.category_id,
                tags=list(payload.tags),
                uploaded_by=uploaded_by,
                uploaded_at=datetime.now(timezone.utc),
                is_popular=payload.is_popular,
                is_featured=payload.is_featured,
                type=payload.type or self.default_video_type,
            )
            self.repository.add_video(video)

        catalog_logger.info(f"Video {video.id} created by {uploaded_by}: {video.title}")
        return video

    def delete_video(self, video_id: int) -> bool:
        with self._lock:
            deleted = self.repository.delete_video(video_id)
        if deleted:
            catalog_logger.info(f"Video {video_id} deleted")
        return deleted

    def record_view(self, video_id: int) -> Video | None:
        with self._lock:
            return self.repository.increment_views(video_id)

    def set_featured(self, video_id: int, featured: bool) -> Video | None:
        with self._lock:
            video = self.repository.set_featured(video_id, featured)
        if video is not None:
            catalog_logger.info(f"Video {video_id} featured={featured}")
        return video

    # Likes

    def set_liked(self, username: str, video_id: int, liked: bool) -> bool:
        """
        Like or unlike a video on behalf of a user.

        Idempotent: repeating a request leaves the counter untouched.

        Returns:
            False if the user or video is unknown, True otherwise
        """
        with self._lock:
            user = self.repository.get_user_by_username(username)
            if user is None or self.repository.get_video(video_id) is None:
                return False

            changed = self.repository.set_like(user.id, video_id, liked)

        if changed:
            action = "liked" if liked else "unliked"
            catalog_logger.info(f"User {username} {action} video {video_id}")
        return True

    def liked_video_ids(self, username: str) -> list[int] | None:
        user = self.repository.get_user_by_username(username)
        if user is None:
            return None
        return self.repository.liked_video_ids(user.id)

    # Categories

    def list_categories(self) -> list[Category]:
        return self.repository.list_categories()

    def find_category_by_id(self, category_id: int) -> Category | None:
        return self.repository.get_category(category_id)

    def find_category_by_slug(self, slug: str) -> Category | None:
        return self.repository.get_category_by_slug(slug)

    def create_category(self, data: CategoryCreate | Mapping[str, Any]) -> Category:
        payload = _validate(CategoryCreate, data, "Invalid category data")

        with self._lock:
            if self.repository.get_category_by_slug(payload.slug) is not None:
                raise ValidationError(f"Category slug '{payload.slug}' already exists")

            category = Category(
                id=self.repository.next_id("categories"),
                name=payload.name,
                icon=payload.icon,
                slug=payload.slug,
            )
            self.repository.add_category(category)

        catalog_logger.info(f"Category {category.id} created: {category.slug}")
        return category

    # Users

    def find_user(self, username: str) -> User | None:
        return self.repository.get_user_by_username(username)

    def create_user(self, data: UserCreate | Mapping[str, Any]) -> User:
        payload = _validate(UserCreate, data, "Invalid user data")

        with self._lock:
            if self.repository.get_user_by_username(payload.username) is not None:
                raise ValidationError(f"Username '{payload.username}' is already taken")

            user = User(
                id=self.repository.next_id("users"),
                username=payload.username,
                password=payload.password,
                is_admin=payload.is_admin,
            )
            self.repository.add_user(user)

        auth_logger.info(f"User {user.username} created (admin={user.is_admin})")
        return user

    def authenticate(self, username: str, password: str) -> User | None:
        user = self.repository.get_user_by_username(username)
        if user is None or not secrets.compare_digest(
            user.password.encode(), password.encode()
        ):
            auth_logger.warning(f"Failed login for {username}")
            return None
        return user

    def require_admin(self, username: str | None) -> User:
        """
        Resolve the caller's identity and check administrator privilege.

        Raises:
            AuthorizationError: 401 without a username, 403 for unknown or
                non-admin users
        """
        if not username:
            raise AuthorizationError("Authentication required", status_code=401)

        user = self.repository.get_user_by_username(username)
        if user is None or not user.is_admin:
            auth_logger.warning(f"Administrator access denied for {username}")
            raise AuthorizationError("Administrator access required")
        return user

    def reset(self) -> None:
        with self._lock:
            self.repository.reset()


def _validate(schema: type[BaseModel], data: BaseModel | Mapping[str, Any], message: str):
    """Coerce raw input into a schema, reporting failures as ValidationError."""
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()

    try:
        return schema.model_validate(data)
    except SchemaError as e:
        raise ValidationError(
            message,
            errors=[
                {"loc": list(error["loc"]), "msg": error["msg"]} for error in e.errors()
            ],
        ) from e
