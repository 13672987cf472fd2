from sqlalchemy import Column, Integer, String

from streambox.database import Base


class IdCounter(Base):
    """Last id issued for a named sequence; ids are never handed out twice."""

    __tablename__ = "id_counters"

    name = Column(String(50), primary_key=True)
    value = Column(Integer, default=0, nullable=False)
