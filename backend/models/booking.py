"""Booking model definitions."""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from backend.database import Base


class Booking(Base):
    """Represents a patient's reservation of a service slot."""
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    clinic_id = Column(String(36), ForeignKey("clinics.id"), nullable=False)
    service_id = Column(String(36), ForeignKey("services.id"), nullable=False)
    patient_name = Column(String)
    patient_phone = Column(String)
    gender = Column(String)
    age = Column(Integer)
    symptoms = Column(Text)
    booking_time = Column(DateTime, nullable=False)
    status = Column(String, default="pending")  # pending/paid/expired
    created_at = Column(DateTime, default=datetime.now)
