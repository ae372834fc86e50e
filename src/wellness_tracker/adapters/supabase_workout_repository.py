"""Supabase repository for workouts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from wellness_tracker.domain.workouts import WorkoutRecord, WorkoutType
from wellness_tracker.errors import RepositoryError
from wellness_tracker.services.workouts import WorkoutRepository

_COLUMNS = "id, user_id, created_at, type, completed"


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for the workouts table."""

    client: Client

    def create_workout(
        self, user_id: UUID, workout_type: WorkoutType, completed: bool
    ) -> WorkoutRecord:
        """Insert a workout row and return it."""
        response = (
            self.client.table("workouts")
            .insert(
                {
                    "user_id": str(user_id),
                    "type": workout_type.value,
                    "completed": completed,
                }
            )
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to create workout")
        return _parse_row(response.data[0])

    def list_recent(self, user_id: UUID, limit: int) -> list[WorkoutRecord]:
        """Return the most recent workouts for a user."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_between(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> WorkoutRecord | None:
        """Return the latest workout logged in the time range."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_workout(
        self, user_id: UUID, workout_id: UUID, updates: dict[str, object]
    ) -> WorkoutRecord:
        """Update a workout row and return it."""
        response = (
            self.client.table("workouts")
            .update(updates)
            .eq("id", str(workout_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to update workout")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> WorkoutRecord:
    return WorkoutRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        type=WorkoutType(row["type"]),
        completed=bool(row.get("completed", False)),
    )
