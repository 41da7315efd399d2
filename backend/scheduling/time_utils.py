"""Time-of-day helpers for slot labels.

Slot labels are zero-padded ``"HH:MM"`` strings. Arithmetic happens on
integer minutes since midnight so that grid generation and ordering never
depend on string comparison.
"""

from datetime import date, datetime, time, timedelta


def time_to_minutes(value: str | time) -> int:
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    parts = str(value).strip().split(':')
    if len(parts) not in (2, 3):
        raise ValueError(f'Invalid time of day: {value!r}')

    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f'Invalid time of day: {value!r}') from exc

    if not 0 <= hours < 24 or not 0 <= minutes < 60:
        # "24:00" is accepted as the end of the day.
        if (hours, minutes) != (24, 0):
            raise ValueError(f'Invalid time of day: {value!r}')

    return hours * 60 + minutes


def minutes_to_hhmm(minutes: int) -> str:
    return f'{minutes // 60:02d}:{minutes % 60:02d}'


def booking_time_label(value: str | datetime) -> str:
    """Return the ``"HH:MM"`` part of a stored booking timestamp.

    The minutes are truncated, never rounded onto a slot boundary.
    """
    if isinstance(value, datetime):
        return minutes_to_hhmm(value.hour * 60 + value.minute)

    text = str(value).strip()
    if len(text) < 16 or text[10] not in ('T', ' '):
        raise ValueError(f'Invalid booking timestamp: {value!r}')

    return minutes_to_hhmm(time_to_minutes(text[11:16]))


def parse_query_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # Only the extended YYYY-MM-DD form; no basic or week-date variants.
    if len(text) != 10:
        raise ValueError(f'Invalid date: {value!r}')
    return datetime.strptime(text, '%Y-%m-%d').date()


def day_bounds(target_date: date) -> tuple[datetime, datetime]:
    start = datetime.combine(target_date, time.min)
    return start, start + timedelta(days=1)
