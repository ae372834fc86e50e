"""Supabase repository for trips."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from wellness_tracker.domain.trips import TripRecord, TripStatus
from wellness_tracker.errors import RepositoryError
from wellness_tracker.services.trips import TripRepository


@dataclass
class SupabaseTripRepository(TripRepository):
    """Supabase implementation for the trips table."""

    client: Client

    def create_trip(self, user_id: UUID, payload: dict[str, object]) -> TripRecord:
        """Insert a trip row and return it."""
        row = _serialize(payload)
        row["user_id"] = str(user_id)
        response = self.client.table("trips").insert(row).execute()
        if not response.data:
            raise RepositoryError("Failed to create trip")
        return _parse_row(response.data[0])

    def list_upcoming(self, user_id: UUID, today: date) -> list[TripRecord]:
        """Return trips that end today or later, soonest first."""
        response = (
            self.client.table("trips")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("end_date", today.isoformat())
            .order("start_date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_all(self, user_id: UUID) -> list[TripRecord]:
        """Return all trips, latest start first."""
        response = (
            self.client.table("trips")
            .select("*")
            .eq("user_id", str(user_id))
            .order("start_date", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_trip(self, user_id: UUID, trip_id: UUID) -> TripRecord | None:
        """Return a trip by id."""
        response = (
            self.client.table("trips")
            .select("*")
            .eq("id", str(trip_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_trip(
        self, user_id: UUID, trip_id: UUID, payload: dict[str, object]
    ) -> TripRecord | None:
        """Update a trip and return the new row."""
        response = (
            self.client.table("trips")
            .update(_serialize(payload))
            .eq("id", str(trip_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_trip(self, user_id: UUID, trip_id: UUID) -> None:
        """Delete a trip."""
        self.client.table("trips").delete().eq("id", str(trip_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _serialize(payload: dict[str, object]) -> dict[str, object]:
    row: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, date | datetime):
            row[key] = value.isoformat()
        elif isinstance(value, Enum):
            row[key] = value.value
        else:
            row[key] = value
    return row


def _parse_row(row: dict[str, object]) -> TripRecord:
    return TripRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        destination=str(row.get("destination") or ""),
        country=str(row.get("country") or ""),
        city=str(row.get("city") or ""),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=date.fromisoformat(str(row["end_date"])),
        status=TripStatus(row.get("status") or TripStatus.PLANNED.value),
        accommodation=_optional_text(row.get("accommodation")),
        flight_number=_optional_text(row.get("flight_number")),
        departure_airport=_optional_text(row.get("departure_airport")),
        arrival_airport=_optional_text(row.get("arrival_airport")),
        departure_time=_optional_datetime(row.get("departure_time")),
        arrival_time=_optional_datetime(row.get("arrival_time")),
        notes=_optional_text(row.get("notes")),
    )


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_datetime(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
