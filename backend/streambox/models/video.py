from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    ForeignKey,
    Boolean,
    JSON,
    Index,
)

from streambox.database import Base, UTCDateTime


class Video(Base):
    """Video model for the streaming catalog."""

    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=False)

    # Video details
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    thumbnail_url = Column(String(1024), nullable=False)
    video_url = Column(String(1024), nullable=False)
    duration = Column(Integer, nullable=False)  # in seconds

    # Counters
    views = Column(Integer, default=0, nullable=False)
    likes = Column(Integer, default=0, nullable=False)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    tags = Column(JSON, default=list, nullable=False)  # Ordered, case preserved
    uploaded_by = Column(String(255), nullable=False)
    uploaded_at = Column(UTCDateTime(timezone=True), nullable=False)

    # Presentation flags
    is_popular = Column(Boolean, default=False, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    type = Column(String(50), nullable=False, index=True)

    __table_args__ = (Index("idx_video_category", "category_id"),)
