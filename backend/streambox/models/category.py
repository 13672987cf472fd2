from sqlalchemy import Column, Integer, String

from streambox.database import Base


class Category(Base):
    """Category used to group and filter catalog videos."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    icon = Column(String(50), nullable=False)  # Rendering hint, opaque to the API
    slug = Column(String(100), unique=True, nullable=False, index=True)
