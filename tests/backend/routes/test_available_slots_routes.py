from datetime import date, datetime, time

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from backend.models.booking import Booking
from backend.models.clinic import Clinic
from backend.models.doctor import Doctor
from backend.models.doctor_schedule import DoctorSchedule
from backend.models.service import Service
from backend.routes.available_slots_routes import SlotStatResponse, get_available_slots


@pytest.fixture
def slots_db(db_session, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr('backend.routes.available_slots_routes.ensure_database_ready', lambda: None)

    checkup = Service(id='service-1', name='General check-up', duration_minutes=30)
    lonely_service = Service(id='service-2', name='Dermatology', duration_minutes=30)
    db_session.add_all([
        Clinic(id='clinic-1', name='Central Clinic'),
        checkup,
        lonely_service,
        Doctor(id='doctor-1', clinic_id='clinic-1', name='Dr. Nguyen', is_available=True, services=[checkup]),
    ])
    db_session.flush()
    db_session.add(
        DoctorSchedule(
            doctor_id='doctor-1',
            date=date(2026, 1, 5),
            start_time=time(7, 0),
            end_time=time(8, 0),
            max_patients=1,
        )
    )
    db_session.add(
        Booking(
            clinic_id='clinic-1',
            service_id='service-1',
            booking_time=datetime(2026, 1, 5, 7, 0),
            status='pending',
        )
    )
    db_session.commit()
    return db_session


def test_get_available_slots_omits_fully_booked_slot(slots_db) -> None:
    response = get_available_slots(clinic_id='clinic-1', service_id='service-1', date='2026-01-05', db=slots_db)

    assert response == [SlotStatResponse(time='07:30', capacity=1, booked=0, available=1)]


def test_get_available_slots_returns_empty_list_without_eligible_doctors(slots_db) -> None:
    response = get_available_slots(clinic_id='clinic-1', service_id='service-2', date='2026-01-05', db=slots_db)

    assert response == []


def test_get_available_slots_returns_empty_list_on_day_without_shifts(slots_db) -> None:
    response = get_available_slots(clinic_id='clinic-1', service_id='service-1', date='2026-01-06', db=slots_db)

    assert response == []


def test_get_available_slots_returns_404_for_unknown_service(slots_db) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_available_slots(clinic_id='clinic-1', service_id='missing', date='2026-01-05', db=slots_db)

    assert exception_info.value.status_code == 404
    assert exception_info.value.detail == 'Service not found'


@pytest.mark.parametrize(
    ('clinic_id', 'service_id', 'query_date', 'error_detail'),
    [
        (None, 'service-1', '2026-01-05', 'Missing query params'),
        ('clinic-1', None, '2026-01-05', 'Missing query params'),
        ('clinic-1', 'service-1', None, 'Missing query params'),
        ('clinic-1', 'service-1', '05-01-2026', 'Invalid date. Expected YYYY-MM-DD.'),
    ],
)
def test_get_available_slots_rejects_invalid_queries(
    slots_db,
    clinic_id: str | None,
    service_id: str | None,
    query_date: str | None,
    error_detail: str,
) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_available_slots(clinic_id=clinic_id, service_id=service_id, date=query_date, db=slots_db)

    assert exception_info.value.status_code == 400
    assert exception_info.value.detail == error_detail


def test_get_available_slots_returns_503_when_database_fails(slots_db, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_query(*_args, **_kwargs):
        raise OperationalError('SELECT 1', {}, Exception('connection refused'))

    monkeypatch.setattr(slots_db, 'query', broken_query)

    with pytest.raises(HTTPException) as exception_info:
        get_available_slots(clinic_id='clinic-1', service_id='service-1', date='2026-01-05', db=slots_db)

    assert exception_info.value.status_code == 503
