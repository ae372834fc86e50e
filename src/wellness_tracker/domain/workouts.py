"""Domain models for workouts."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class WorkoutType(str, Enum):
    """Workout categories in rotation order."""

    PUSH = "push"
    PULL = "pull"
    CARDIO = "cardio"


@dataclass(frozen=True)
class WorkoutRecord:
    """Workout row as stored in the database."""

    id: UUID
    user_id: UUID
    created_at: datetime
    type: WorkoutType
    completed: bool
