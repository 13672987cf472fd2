"""SQLAlchemy-backed catalog repository."""

from datetime import datetime, timezone

from sqlalchemy import case, delete, insert, select, update
from sqlalchemy.engine import Engine

from streambox.database import Base, create_session_factory
from streambox.logger import db_logger
from streambox.models.category import Category
from streambox.models.counter import IdCounter
from streambox.models.like import video_likes
from streambox.models.user import User
from streambox.models.video import Video
from streambox.repositories.base import CatalogRepository


class SqlCatalogRepository(CatalogRepository):
    """Stores the catalog in a relational database through SQLAlchemy."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = create_session_factory(engine)
        Base.metadata.create_all(bind=engine)
        db_logger.info(f"Catalog tables ready on {engine.url.drivername}")

    def next_id(self, sequence: str) -> int:
        with self._session_factory() as db:
            counter = db.get(IdCounter, sequence, with_for_update=True)
            if counter is None:
                counter = IdCounter(name=sequence, value=0)
                db.add(counter)
            counter.value += 1
            value = counter.value
            db.commit()
            return value

    def add_category(self, category: Category) -> Category:
        return self._add(category)

    def get_category(self, category_id: int) -> Category | None:
        with self._session_factory() as db:
            return db.get(Category, category_id)

    def get_category_by_slug(self, slug: str) -> Category | None:
        with self._session_factory() as db:
            return db.scalars(select(Category).filter_by(slug=slug)).first()

    def list_categories(self) -> list[Category]:
        with self._session_factory() as db:
            return list(db.scalars(select(Category).order_by(Category.id)))

    def add_video(self, video: Video) -> Video:
        return self._add(video)

    def get_video(self, video_id: int) -> Video | None:
        with self._session_factory() as db:
            return db.get(Video, video_id)

    def list_videos(self) -> list[Video]:
        # Ids are issued monotonically, so id order is insertion order
        with self._session_factory() as db:
            return list(db.scalars(select(Video).order_by(Video.id)))

    def delete_video(self, video_id: int) -> bool:
        with self._session_factory() as db:
            db.execute(delete(video_likes).where(video_likes.c.video_id == video_id))
            result = db.execute(delete(Video).where(Video.id == video_id))
            db.commit()
            return result.rowcount > 0

    def increment_views(self, video_id: int) -> Video | None:
        return self._update_video(video_id, views=Video.views + 1)

    def set_featured(self, video_id: int, featured: bool) -> Video | None:
        return self._update_video(video_id, is_featured=featured)

    def set_like(self, user_id: int, video_id: int, liked: bool) -> bool:
        key = (video_likes.c.user_id == user_id) & (video_likes.c.video_id == video_id)

        with self._session_factory() as db:
            exists = db.execute(select(video_likes.c.user_id).where(key)).first()

            if liked:
                if exists:
                    return False
                db.execute(
                    insert(video_likes).values(
                        user_id=user_id,
                        video_id=video_id,
                        liked_at=datetime.now(timezone.utc),
                    )
                )
                counter = Video.likes + 1
            else:
                if not exists:
                    return False
                db.execute(delete(video_likes).where(key))
                counter = case((Video.likes > 0, Video.likes - 1), else_=0)

            db.execute(update(Video).where(Video.id == video_id).values(likes=counter))
            db.commit()
            return True

    def liked_video_ids(self, user_id: int) -> list[int]:
        with self._session_factory() as db:
            rows = db.execute(
                select(video_likes.c.video_id)
                .where(video_likes.c.user_id == user_id)
                .order_by(video_likes.c.liked_at, video_likes.c.video_id)
            )
            return [video_id for (video_id,) in rows]

    def add_user(self, user: User) -> User:
        return self._add(user)

    def get_user_by_username(self, username: str) -> User | None:
        with self._session_factory() as db:
            return db.scalars(select(User).filter_by(username=username)).first()

    def reset(self) -> None:
        Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        db_logger.warning("Catalog tables dropped and recreated")

    def _add(self, instance):
        with self._session_factory() as db:
            db.add(instance)
            db.commit()
            return instance

    def _update_video(self, video_id: int, **values) -> Video | None:
        with self._session_factory() as db:
            result = db.execute(update(Video).where(Video.id == video_id).values(**values))
            db.commit()
            if result.rowcount == 0:
                return None
            return db.get(Video, video_id)
