"""Fill an empty database with demo clinics, doctors, shifts and bookings.

Usage:
    python -m backend.seed_demo_data
"""
import logging
from datetime import date, datetime, time, timedelta

from sqlalchemy.orm import Session

from backend.database import Base, SessionLocal, engine
from backend.models.booking import Booking
from backend.models.clinic import Clinic
from backend.models.doctor import Doctor
from backend.models.doctor_schedule import DoctorSchedule
from backend.models.service import Service

logger = logging.getLogger(__name__)

SEED_DAYS = 7
MORNING_SHIFT = (time(7, 0), time(11, 30))
AFTERNOON_SHIFT = (time(13, 30), time(17, 0))

DEMO_CLINICS = [
    {'name': 'Central Clinic', 'address': '125 Main Street', 'phone': '0236 3822 118'},
    {'name': 'Riverside Clinic', 'address': '88 River Road', 'phone': '0255 3822 119'},
]

DEMO_SERVICES = [
    {'name': 'General check-up', 'description': 'Routine health examination', 'price': 2000},
    {'name': 'Internal medicine', 'description': 'Cardiology, digestive and respiratory care', 'price': 2000},
    {'name': 'Pediatrics', 'description': 'Examination and treatment for children', 'price': 2000},
]

DEMO_DOCTORS = [
    ('Dr. Nguyen', 'General practice', 0, [0, 1]),
    ('Dr. Tran', 'Internal medicine', 0, [0, 1]),
    ('Dr. Le', 'Pediatrics', 1, [0, 2]),
]


def seed(db: Session, start_date: date | None = None) -> bool:
    """Insert the demo dataset. Returns False when data already exists."""
    if db.query(Clinic.id).first() is not None:
        logger.info('Data already exists, skipping seed.')
        return False

    start_date = start_date or date.today()

    clinics = [Clinic(**values) for values in DEMO_CLINICS]
    services = [Service(duration_minutes=30, **values) for values in DEMO_SERVICES]
    db.add_all(clinics + services)
    db.flush()

    doctors = []
    for name, specialty, clinic_index, service_indexes in DEMO_DOCTORS:
        doctor = Doctor(
            name=name,
            specialty=specialty,
            clinic_id=clinics[clinic_index].id,
            is_available=True,
            services=[services[index] for index in service_indexes],
        )
        doctors.append(doctor)
    db.add_all(doctors)
    db.flush()

    for offset in range(SEED_DAYS):
        shift_date = start_date + timedelta(days=offset)
        for doctor in doctors:
            for shift_start, shift_end in (MORNING_SHIFT, AFTERNOON_SHIFT):
                db.add(
                    DoctorSchedule(
                        doctor_id=doctor.id,
                        date=shift_date,
                        start_time=shift_start,
                        end_time=shift_end,
                        max_patients=5,
                        is_available=True,
                    )
                )

    first_slot = datetime.combine(start_date, MORNING_SHIFT[0])
    db.add_all([
        Booking(
            clinic_id=clinics[0].id,
            service_id=services[0].id,
            patient_name='Demo Patient',
            patient_phone='0901234567',
            booking_time=first_slot,
            status='pending',
        ),
        Booking(
            clinic_id=clinics[0].id,
            service_id=services[0].id,
            patient_name='Expired Patient',
            patient_phone='0901234568',
            booking_time=first_slot,
            status='expired',
        ),
    ])

    db.commit()
    logger.info('Seeded %d clinics, %d services and %d doctors.', len(clinics), len(services), len(doctors))
    return True


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
