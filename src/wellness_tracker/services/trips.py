"""Trip planning service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from wellness_tracker.domain.trips import TripRecord, TripStatus
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.days import local_today

_REQUIRED_FIELDS = ("destination", "country", "city", "start_date", "end_date")
_OPTIONAL_TEXT_FIELDS = (
    "accommodation",
    "flight_number",
    "departure_airport",
    "arrival_airport",
    "notes",
)
_OPTIONAL_TIME_FIELDS = ("departure_time", "arrival_time")

_logger = logging.getLogger(__name__)


class TripRepository(Protocol):
    """Persistence interface for trips."""

    def create_trip(self, user_id: UUID, payload: dict[str, object]) -> TripRecord:
        """Insert a trip row and return it."""

    def list_upcoming(self, user_id: UUID, today: date) -> list[TripRecord]:
        """Return trips ending on or after ``today``, soonest first."""

    def list_all(self, user_id: UUID) -> list[TripRecord]:
        """Return all trips, latest start first."""

    def get_trip(self, user_id: UUID, trip_id: UUID) -> TripRecord | None:
        """Return a trip by id."""

    def update_trip(
        self, user_id: UUID, trip_id: UUID, payload: dict[str, object]
    ) -> TripRecord | None:
        """Update a trip and return the new row."""

    def delete_trip(self, user_id: UUID, trip_id: UUID) -> None:
        """Delete a trip."""


@dataclass
class TripService:
    """Service for validating and storing trips."""

    repository: TripRepository
    timezone: ZoneInfo

    def create(self, user_id: UUID, payload: dict[str, object]) -> TripRecord:
        """Validate and persist a new trip."""
        missing = [key for key in _REQUIRED_FIELDS if _is_blank(payload.get(key))]
        if missing:
            raise ValidationError("Please fill in all required fields")
        cleaned = _clean_payload(payload)
        _check_date_order(cleaned["start_date"], cleaned["end_date"])
        cleaned.setdefault("status", TripStatus.PLANNED)
        trip = self.repository.create_trip(user_id, cleaned)
        _logger.info("Trip created: user=%s trip=%s", user_id, trip.id)
        return trip

    def upcoming(self, user_id: UUID) -> list[TripRecord]:
        """Return trips that have not ended yet."""
        return self.repository.list_upcoming(user_id, local_today(self.timezone))

    def all(self, user_id: UUID) -> list[TripRecord]:
        """Return every trip for the user."""
        return self.repository.list_all(user_id)

    def get(self, user_id: UUID, trip_id: UUID) -> TripRecord | None:
        """Return a trip by id."""
        return self.repository.get_trip(user_id, trip_id)

    def update(
        self, user_id: UUID, trip_id: UUID, payload: dict[str, object]
    ) -> TripRecord | None:
        """Validate and apply edits to a trip."""
        for key in _REQUIRED_FIELDS:
            if key in payload and _is_blank(payload[key]):
                raise ValidationError("Please fill in all required fields")
        cleaned = _clean_payload(payload)
        if "start_date" in cleaned or "end_date" in cleaned:
            current = self.repository.get_trip(user_id, trip_id)
            if current is None:
                return None
            _check_date_order(
                cleaned.get("start_date", current.start_date),
                cleaned.get("end_date", current.end_date),
            )
        if not cleaned:
            return self.repository.get_trip(user_id, trip_id)
        return self.repository.update_trip(user_id, trip_id, cleaned)

    def delete(self, user_id: UUID, trip_id: UUID) -> None:
        """Delete a trip."""
        self.repository.delete_trip(user_id, trip_id)
        _logger.info("Trip deleted: user=%s trip=%s", user_id, trip_id)


def _clean_payload(payload: dict[str, object]) -> dict[str, object]:
    cleaned: dict[str, object] = {}
    for key in ("destination", "country", "city"):
        if key in payload:
            cleaned[key] = str(payload[key]).strip()
    for key in ("start_date", "end_date"):
        if key in payload:
            cleaned[key] = _parse_date(payload[key], key)
    for key in _OPTIONAL_TEXT_FIELDS:
        if key in payload:
            value = payload[key]
            cleaned[key] = None if _is_blank(value) else str(value).strip()
    for key in _OPTIONAL_TIME_FIELDS:
        if key in payload:
            cleaned[key] = _parse_datetime(payload[key], key)
    if payload.get("status") is not None:
        try:
            cleaned["status"] = TripStatus(payload["status"])
        except ValueError as exc:
            raise ValidationError(f"Unknown trip status: {payload['status']}") from exc
    return cleaned


def _check_date_order(start: object, end: object) -> None:
    if isinstance(start, date) and isinstance(end, date) and end < start:
        raise ValidationError("End date must be after start date")


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(value: object, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise ValidationError(f"Invalid date for {field_name}") from exc


def _parse_datetime(value: object, field_name: str) -> datetime | None:
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise ValidationError(f"Invalid time for {field_name}") from exc
