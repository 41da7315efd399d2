import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


def _get_statuses(value: str | None, default: list[str]) -> tuple[str, ...]:
    return tuple(status.lower() for status in _get_list(value, default))

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./clinic_booking.db")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), ["http://localhost:3000"])

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_SERVICE_DURATION_MINUTES = int(os.getenv("DEFAULT_SERVICE_DURATION_MINUTES", "30"))
ACTIVE_BOOKING_STATUSES = _get_statuses(os.getenv("ACTIVE_BOOKING_STATUSES"), ["pending", "paid"])

def validate_runtime_config() -> None:
    if DEFAULT_SERVICE_DURATION_MINUTES <= 0:
        raise RuntimeError("DEFAULT_SERVICE_DURATION_MINUTES must be greater than zero.")
    if not ACTIVE_BOOKING_STATUSES:
        raise RuntimeError("ACTIVE_BOOKING_STATUSES must name at least one booking status.")
