"""Clinic model definitions."""

import uuid

from sqlalchemy import Column, String, Text
from backend.database import Base


class Clinic(Base):
    """Represents a clinic location that offers services."""
    __tablename__ = "clinics"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False, index=True)
    address = Column(String)
    phone = Column(String)
    email = Column(String)
    description = Column(Text)
