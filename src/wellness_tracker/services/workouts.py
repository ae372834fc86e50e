"""Workout tracking and rotation service."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from wellness_tracker.domain.workouts import WorkoutRecord, WorkoutType
from wellness_tracker.services.days import day_bounds, local_today

_ROTATION = {
    WorkoutType.PUSH: WorkoutType.PULL,
    WorkoutType.PULL: WorkoutType.CARDIO,
    WorkoutType.CARDIO: WorkoutType.PUSH,
}
_RECENT_LIMIT = 7

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts."""

    def create_workout(
        self, user_id: UUID, workout_type: WorkoutType, completed: bool
    ) -> WorkoutRecord:
        """Insert a workout row and return it."""

    def list_recent(self, user_id: UUID, limit: int) -> list[WorkoutRecord]:
        """Return the most recent workouts, newest first."""

    def get_between(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> WorkoutRecord | None:
        """Return the workout logged in [start, end), if any."""

    def update_workout(
        self, user_id: UUID, workout_id: UUID, updates: dict[str, object]
    ) -> WorkoutRecord:
        """Update a workout and return the new row."""


def next_workout_type(last: WorkoutType | None) -> WorkoutType:
    """Return the workout that follows ``last`` in the push/pull/cardio cycle."""
    if last is None:
        return WorkoutType.PUSH
    return _ROTATION.get(last, WorkoutType.PUSH)


@dataclass
class WorkoutService:
    """Service for logging workouts and recommending the next one."""

    repository: WorkoutRepository
    timezone: ZoneInfo

    def recent(self, user_id: UUID, limit: int = _RECENT_LIMIT) -> list[WorkoutRecord]:
        """Return recent workouts, newest first."""
        return self.repository.list_recent(user_id, limit)

    def today(self, user_id: UUID) -> WorkoutRecord | None:
        """Return today's workout in the configured timezone."""
        start, end = day_bounds(local_today(self.timezone), self.timezone)
        return self.repository.get_between(user_id, start, end)

    def recommend_next(self, user_id: UUID) -> WorkoutType:
        """Recommend the next workout type from the latest logged one."""
        try:
            recent = self.repository.list_recent(user_id, _RECENT_LIMIT)
        except Exception:
            _logger.exception("Failed to load workouts for recommendation")
            return WorkoutType.PUSH
        return next_workout_type(recent[0].type if recent else None)

    def save_today(
        self, user_id: UUID, workout_type: WorkoutType, completed: bool = False
    ) -> WorkoutRecord:
        """Create today's workout or update it if one exists."""
        existing = self.today(user_id)
        if existing:
            workout = self.repository.update_workout(
                user_id,
                existing.id,
                {"type": workout_type.value, "completed": completed},
            )
        else:
            workout = self.repository.create_workout(user_id, workout_type, completed)
        _logger.info(
            "Workout saved: user=%s type=%s completed=%s",
            user_id,
            workout.type.value,
            workout.completed,
        )
        return workout
