"""Read-only records and lookup contracts consumed by the slot aggregator."""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol, Sequence


@dataclass(frozen=True)
class ServiceDuration:
    service_id: str
    duration_minutes: int | None


@dataclass(frozen=True)
class ShiftRecord:
    doctor_id: str
    start_time: str | time
    end_time: str | time
    max_patients: int | None


@dataclass(frozen=True)
class BookingRecord:
    booking_time: str | datetime


@dataclass(frozen=True)
class SlotStat:
    time: str
    capacity: int
    booked: int
    available: int

    def to_dict(self) -> dict:
        return {
            'time': self.time,
            'capacity': self.capacity,
            'booked': self.booked,
            'available': self.available,
        }


class ServiceLookup(Protocol):
    def get_service_duration(self, service_id: str) -> ServiceDuration | None:
        """Return the service's slot length, or None if it does not exist."""


class ScheduleLookup(Protocol):
    def list_eligible_doctors(self, clinic_id: str, service_id: str) -> list[str]:
        """Return ids of available doctors at the clinic qualified for the service."""

    def list_schedules(self, doctor_ids: Sequence[str], target_date: date) -> list[ShiftRecord]:
        """Return the available shifts of the given doctors on the date."""


class BookingLookup(Protocol):
    def list_active_bookings(self, clinic_id: str, service_id: str, target_date: date) -> list[BookingRecord]:
        """Return pending or paid bookings for the clinic and service on the date."""
