"""Service model definitions."""

import uuid

from sqlalchemy import Column, Integer, String, Text
from backend.database import Base


class Service(Base):
    """Represents a bookable medical service."""
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False, index=True)
    description = Column(Text)
    price = Column(Integer, default=0)
    duration_minutes = Column(Integer)  # null means the default slot length
