"""Doctor schedule model definitions."""

import uuid

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Time
from backend.database import Base


class DoctorSchedule(Base):
    """Represents one shift of a doctor on a given date."""
    __tablename__ = "doctor_schedules"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    doctor_id = Column(String(36), ForeignKey("doctors.id"), nullable=False)
    date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    max_patients = Column(Integer, default=1)  # per generated slot
    is_available = Column(Boolean, default=True)
