from sqlalchemy import Column, Integer, ForeignKey, Table

from streambox.database import Base, UTCDateTime

# Many-to-many relationship between users and the videos they liked
video_likes = Table(
    "video_likes",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "video_id",
        Integer,
        ForeignKey("videos.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("liked_at", UTCDateTime(timezone=True), nullable=False),
)
