from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Collection, Iterator

from ..core.constants import WEEKDAY_NAMES
from ..core.exceptions import BadRequestError, InvalidRangeError

DATE_KEY_FORMAT = "%Y-%m-%d"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def parse_date_key(value: str | None, field_name: str = "date") -> date:
    """Parse a canonical date key, raising BadRequestError on bad input."""
    if not value or not str(value).strip():
        raise BadRequestError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise BadRequestError(f"{field_name} must be a valid YYYY-MM-DD date: {value!r}")


def format_date_key(value: date) -> str:
    return value.strftime(DATE_KEY_FORMAT)


def normalize_date_key(value: str | date, field_name: str = "date") -> str:
    """Return the canonical key for a date or a loosely formatted date string."""
    if isinstance(value, date):
        return format_date_key(value)
    return format_date_key(parse_date_key(value, field_name))


def day_of_week(value: date) -> int:
    """Day of week with 0 = Sunday .. 6 = Saturday."""
    return (value.weekday() + 1) % 7


def is_non_working_day(value: date, holidays: Collection[str] = ()) -> bool:
    if day_of_week(value) == 0:
        return True
    return format_date_key(value) in holidays


def iter_dates(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def iter_date_keys(start: date, end: date) -> Iterator[str]:
    for d in iter_dates(start, end):
        yield format_date_key(d)


def count_working_days(start: date, end: date, holidays: Collection[str] = ()) -> int:
    """Inclusive count of days that are neither Sunday nor a declared holiday."""
    if start > end:
        raise InvalidRangeError("startDate must be before or equal to endDate")
    return sum(1 for d in iter_dates(start, end) if not is_non_working_day(d, holidays))


def parse_date_range(start: str | None, end: str | None) -> tuple[date, date]:
    start_d = parse_date_key(start, "startDate")
    end_d = parse_date_key(end, "endDate")
    if start_d > end_d:
        raise InvalidRangeError("startDate must be before or equal to endDate")
    return start_d, end_d


def parse_hhmm(value: str) -> int:
    """Minutes since midnight for an HH:MM wall-clock time."""
    parsed = datetime.strptime(value.strip(), "%H:%M")
    return parsed.hour * 60 + parsed.minute


def weekday_name(value: date) -> str:
    return WEEKDAY_NAMES[day_of_week(value)]


def format_day_date(value: date) -> str:
    """Render e.g. 'Monday, 03 Jun 2024'."""
    return f"{weekday_name(value)}, {value.strftime('%d %b %Y')}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
