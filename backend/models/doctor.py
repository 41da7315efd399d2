"""Doctor model definitions."""

import uuid

from sqlalchemy import Boolean, Column, ForeignKey, String, Table
from sqlalchemy.orm import relationship
from backend.database import Base


doctor_services = Table(
    "doctor_services",
    Base.metadata,
    Column("doctor_id", String(36), ForeignKey("doctors.id"), primary_key=True),
    Column("service_id", String(36), ForeignKey("services.id"), primary_key=True),
)


class Doctor(Base):
    """Represents a doctor affiliated with a clinic."""
    __tablename__ = "doctors"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    clinic_id = Column(String(36), ForeignKey("clinics.id"), nullable=False)
    name = Column(String, nullable=False)
    specialty = Column(String)
    is_available = Column(Boolean, default=True)

    services = relationship("Service", secondary=doctor_services)
