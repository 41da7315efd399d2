"""Database-backed lookups for slot aggregation."""

from datetime import date
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core import config
from backend.models.booking import Booking
from backend.models.doctor import Doctor, doctor_services
from backend.models.doctor_schedule import DoctorSchedule
from backend.models.service import Service
from backend.scheduling.exceptions import UpstreamFailure
from backend.scheduling.records import BookingRecord, ServiceDuration, ShiftRecord
from backend.scheduling.slot_aggregator import SlotAggregator
from backend.scheduling.time_utils import day_bounds


class SqlAlchemySlotRepository:
    """Implements the service, schedule and booking lookups over one session."""

    def __init__(self, db: Session, active_statuses: Sequence[str] | None = None) -> None:
        self._db = db
        self._active_statuses = tuple(active_statuses or config.ACTIVE_BOOKING_STATUSES)

    def get_service_duration(self, service_id: str) -> ServiceDuration | None:
        try:
            row = self._db.query(Service.id, Service.duration_minutes).filter(
                Service.id == service_id,
            ).first()
        except SQLAlchemyError as exc:
            raise UpstreamFailure(f'Could not read service {service_id}') from exc

        if row is None:
            return None
        return ServiceDuration(service_id=row.id, duration_minutes=row.duration_minutes)

    def list_eligible_doctors(self, clinic_id: str, service_id: str) -> list[str]:
        try:
            rows = self._db.query(Doctor.id).join(
                doctor_services,
                doctor_services.c.doctor_id == Doctor.id,
            ).filter(
                Doctor.clinic_id == clinic_id,
                Doctor.is_available.is_(True),
                doctor_services.c.service_id == service_id,
            ).distinct().all()
        except SQLAlchemyError as exc:
            raise UpstreamFailure('Could not read doctors') from exc

        return [row.id for row in rows]

    def list_schedules(self, doctor_ids: Sequence[str], target_date: date) -> list[ShiftRecord]:
        if not doctor_ids:
            return []

        try:
            rows = self._db.query(
                DoctorSchedule.doctor_id,
                DoctorSchedule.start_time,
                DoctorSchedule.end_time,
                DoctorSchedule.max_patients,
            ).filter(
                DoctorSchedule.date == target_date,
                DoctorSchedule.is_available.is_(True),
                DoctorSchedule.doctor_id.in_(list(doctor_ids)),
            ).all()
        except SQLAlchemyError as exc:
            raise UpstreamFailure('Could not read doctor schedules') from exc

        return [
            ShiftRecord(
                doctor_id=row.doctor_id,
                start_time=row.start_time,
                end_time=row.end_time,
                max_patients=row.max_patients,
            )
            for row in rows
        ]

    def list_active_bookings(self, clinic_id: str, service_id: str, target_date: date) -> list[BookingRecord]:
        day_start, next_day_start = day_bounds(target_date)

        try:
            rows = self._db.query(Booking.booking_time).filter(
                Booking.clinic_id == clinic_id,
                Booking.service_id == service_id,
                Booking.status.in_(self._active_statuses),
                Booking.booking_time >= day_start,
                Booking.booking_time < next_day_start,
            ).all()
        except SQLAlchemyError as exc:
            raise UpstreamFailure('Could not read bookings') from exc

        return [BookingRecord(booking_time=row.booking_time) for row in rows]


def build_slot_aggregator(db: Session) -> SlotAggregator:
    repository = SqlAlchemySlotRepository(db)
    return SlotAggregator(
        service_lookup=repository,
        schedule_lookup=repository,
        booking_lookup=repository,
    )
