from datetime import timezone

from sqlalchemy import DateTime, TypeDecorator, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from streambox.config import settings

# Base class for models
Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """DateTime that is stored in UTC and always loaded timezone-aware.

    SQLite keeps no offset, so naive values read back are tagged as UTC.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the catalog database."""
    if database_url.startswith("sqlite"):
        # In-memory SQLite lives inside a single connection, so share it
        # across threads instead of pooling
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.debug,
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=1800,  # recycle every 30min to avoid stale connections
        echo=settings.debug,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory whose objects stay readable after commit."""
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
    )
