from sqlalchemy import Column, Integer, String, Boolean

from streambox.database import Base


class User(Base):
    """User allowed to like videos and, when flagged, administer the catalog."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=False)
    username = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
