from threading import Lock

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker

from backend.core import config


engine = create_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

DATABASE_UNAVAILABLE_DETAIL = 'Database unavailable. Verify DATABASE_URL and database credentials.'

_schema_lock = Lock()
_scheduling_indexes_checked = False


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_scheduling_indexes() -> None:
    global _scheduling_indexes_checked

    if _scheduling_indexes_checked:
        return

    with _schema_lock:
        if _scheduling_indexes_checked:
            return

        table_names = set(inspect(engine).get_table_names())
        index_statements = []

        if 'doctor_schedules' in table_names:
            index_statements.append(
                'CREATE INDEX IF NOT EXISTS idx_doctor_schedules_date_doctor '
                'ON doctor_schedules(date, doctor_id)'
            )
        if 'bookings' in table_names:
            index_statements.append(
                'CREATE INDEX IF NOT EXISTS idx_bookings_clinic_service_time '
                'ON bookings(clinic_id, service_id, booking_time)'
            )
        if 'doctors' in table_names:
            index_statements.append(
                'CREATE INDEX IF NOT EXISTS idx_doctors_clinic_available '
                'ON doctors(clinic_id, is_available)'
            )

        if index_statements:
            with engine.begin() as connection:
                for statement in index_statements:
                    connection.execute(text(statement))

        _scheduling_indexes_checked = True
