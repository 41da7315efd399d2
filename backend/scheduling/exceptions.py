"""Errors raised while computing slot availability."""


class SchedulingError(Exception):
    """Base class for availability lookup errors."""


class InvalidRequest(SchedulingError):
    """Raised when clinic, service or date are missing or malformed."""


class ServiceNotFound(SchedulingError):
    """Raised when the requested service does not exist."""


class UpstreamFailure(SchedulingError):
    """Raised when doctors, schedules or bookings cannot be read."""
