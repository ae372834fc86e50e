"""Domain models and display helpers for trips."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class TripStatus(str, Enum):
    """Lifecycle status of a trip."""

    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TripRecord:
    """Trip row as stored in the database."""

    id: UUID
    user_id: UUID
    created_at: datetime
    destination: str
    country: str
    city: str
    start_date: date
    end_date: date
    status: TripStatus = TripStatus.PLANNED
    accommodation: str | None = None
    flight_number: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    notes: str | None = None


def trip_duration_days(start: date, end: date) -> int:
    """Return the trip length in days, counting both ends."""
    return abs((end - start).days) + 1


def format_date(value: date) -> str:
    """Format a date like ``Mar 5, 2025``."""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def format_date_range(start: date, end: date) -> str:
    """Format a date range, collapsing the month when it does not change."""
    start_month = _MONTHS[start.month - 1]
    end_month = _MONTHS[end.month - 1]
    if start_month == end_month:
        return f"{start_month} {start.day}-{end.day}, {end.year}"
    return f"{start_month} {start.day} - {end_month} {end.day}, {end.year}"


def format_time(value: datetime | None) -> str:
    """Format a time like ``9:05 AM``; empty for missing values."""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"  # noqa: PLR2004
    return f"{hour}:{value.minute:02d} {suffix}"
