"""Workout endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from wellness_tracker.api.dependencies import current_user_id, get_container
from wellness_tracker.api.models import WorkoutSaveRequest
from wellness_tracker.domain.workouts import WorkoutRecord

if TYPE_CHECKING:
    from wellness_tracker.containers import AppContainer

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("")
async def recent_workouts(
    request: Request, limit: int = 7, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return recent workouts, newest first."""
    container: AppContainer = get_container(request)
    workouts = container.workout_service.recent(user_id, limit)
    return {"workouts": [_workout_payload(workout) for workout in workouts]}


@router.get("/recommendation")
async def recommended_workout(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, str]:
    """Return the next workout type in the rotation."""
    container: AppContainer = get_container(request)
    return {"type": container.workout_service.recommend_next(user_id).value}


@router.get("/today")
async def todays_workout(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return today's workout, if one was logged."""
    container: AppContainer = get_container(request)
    workout = container.workout_service.today(user_id)
    return {"workout": _workout_payload(workout) if workout else None}


@router.put("/today")
async def save_todays_workout(
    body: WorkoutSaveRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Create or update today's workout."""
    container: AppContainer = get_container(request)
    workout = container.workout_service.save_today(user_id, body.type, body.completed)
    return {"workout": _workout_payload(workout)}


def _workout_payload(workout: WorkoutRecord) -> dict[str, object]:
    return {
        "id": str(workout.id),
        "created_at": workout.created_at.isoformat(),
        "type": workout.type.value,
        "completed": workout.completed,
    }
