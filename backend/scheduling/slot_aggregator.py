"""
Available-slot aggregation for a clinic, service and date.

Doctor shifts are cut into fixed-length slots of the service duration. Slots
from different doctors or shifts that start at the same time of day pool
their capacity. Active bookings are counted per exact ``"HH:MM"`` label and
subtracted; fully booked labels are dropped from the result.
"""

import logging
from collections import Counter
from datetime import date
from typing import Iterable

from backend.core import config
from backend.scheduling.exceptions import InvalidRequest, ServiceNotFound, UpstreamFailure
from backend.scheduling.records import (
    BookingLookup,
    BookingRecord,
    ScheduleLookup,
    ServiceLookup,
    ShiftRecord,
    SlotStat,
)
from backend.scheduling.time_utils import (
    booking_time_label,
    minutes_to_hhmm,
    parse_query_date,
    time_to_minutes,
)

logger = logging.getLogger(__name__)


def count_bookings_by_label(bookings: Iterable[BookingRecord]) -> Counter:
    return Counter(booking_time_label(booking.booking_time) for booking in bookings)


def build_capacity_index(shifts: Iterable[ShiftRecord], duration_minutes: int) -> dict[str, int]:
    """Sum per-slot capacity for every label generated by the shifts.

    A slot is emitted at ``t`` only while ``t + duration`` still fits before
    the shift end, so a trailing remainder shorter than the duration is
    dropped instead of becoming a short slot.
    """
    if duration_minutes <= 0:
        raise ValueError('duration_minutes must be greater than zero')

    capacity_by_label: dict[str, int] = {}

    for shift in shifts:
        start = time_to_minutes(shift.start_time)
        end = time_to_minutes(shift.end_time)
        capacity_per_slot = shift.max_patients or 0

        current = start
        while current + duration_minutes <= end:
            label = minutes_to_hhmm(current)
            capacity_by_label[label] = capacity_by_label.get(label, 0) + capacity_per_slot
            current += duration_minutes

    return capacity_by_label


def merge_slot_stats(capacity_by_label: dict[str, int], booked_by_label: Counter) -> list[SlotStat]:
    """Combine capacity and bookings into bookable slots sorted by time of day.

    Labels that only appear in the bookings are never surfaced.
    """
    slots = []
    for label, capacity in capacity_by_label.items():
        booked = booked_by_label.get(label, 0)
        available = max(capacity - booked, 0)
        if available > 0:
            slots.append(SlotStat(time=label, capacity=capacity, booked=booked, available=available))

    slots.sort(key=lambda slot: time_to_minutes(slot.time))
    return slots


class SlotAggregator:
    """
    Computes bookable slots from read-only lookups.

    The lookups are injected so the aggregation can run against the
    database repository or against in-memory fakes.
    """

    def __init__(
        self,
        service_lookup: ServiceLookup,
        schedule_lookup: ScheduleLookup,
        booking_lookup: BookingLookup,
        default_duration_minutes: int | None = None,
    ) -> None:
        self._service_lookup = service_lookup
        self._schedule_lookup = schedule_lookup
        self._booking_lookup = booking_lookup
        self._default_duration_minutes = default_duration_minutes or config.DEFAULT_SERVICE_DURATION_MINUTES

    def compute_available_slots(self, clinic_id: str, service_id: str, target_date: str | date) -> list[SlotStat]:
        """
        Return bookable slots for the clinic and service on the date.

        Raises:
            InvalidRequest: a parameter is missing or the date is malformed
            ServiceNotFound: the service does not exist
            UpstreamFailure: a lookup could not be read or returned a malformed time
        """
        clinic_id, service_id, slot_date = self._validate_request(clinic_id, service_id, target_date)

        duration_minutes = self._resolve_duration(service_id)

        doctor_ids = self._schedule_lookup.list_eligible_doctors(clinic_id, service_id)
        if not doctor_ids:
            logger.debug('No eligible doctors for clinic=%s service=%s', clinic_id, service_id)
            return []

        shifts = self._schedule_lookup.list_schedules(doctor_ids, slot_date)
        if not shifts:
            logger.debug('No shifts on %s for %d eligible doctors', slot_date, len(doctor_ids))
            return []

        bookings = self._booking_lookup.list_active_bookings(clinic_id, service_id, slot_date)

        try:
            capacity_by_label = build_capacity_index(shifts, duration_minutes)
            booked_by_label = count_bookings_by_label(bookings)
        except ValueError as exc:
            raise UpstreamFailure(f'Stored schedule or booking time is malformed: {exc}') from exc

        slots = merge_slot_stats(capacity_by_label, booked_by_label)

        logger.debug(
            'clinic=%s service=%s date=%s: %d shifts, %d bookings, %d open slots',
            clinic_id,
            service_id,
            slot_date,
            len(shifts),
            len(bookings),
            len(slots),
        )
        return slots

    def _resolve_duration(self, service_id: str) -> int:
        service = self._service_lookup.get_service_duration(service_id)
        if service is None:
            raise ServiceNotFound('Service not found')

        if service.duration_minutes is None:
            return self._default_duration_minutes

        if service.duration_minutes <= 0:
            logger.warning(
                'Service %s has invalid duration %s; using %d minutes',
                service_id,
                service.duration_minutes,
                self._default_duration_minutes,
            )
            return self._default_duration_minutes

        return service.duration_minutes

    @staticmethod
    def _validate_request(clinic_id, service_id, target_date) -> tuple[str, str, date]:
        normalized_clinic_id = str(clinic_id).strip() if clinic_id is not None else ''
        normalized_service_id = str(service_id).strip() if service_id is not None else ''

        if not normalized_clinic_id or not normalized_service_id or not target_date:
            raise InvalidRequest('Missing query params')

        try:
            slot_date = parse_query_date(target_date)
        except ValueError as exc:
            raise InvalidRequest('Invalid date. Expected YYYY-MM-DD.') from exc

        return normalized_clinic_id, normalized_service_id, slot_date
