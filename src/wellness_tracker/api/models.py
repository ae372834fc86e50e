"""Request models for the HTTP API."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from wellness_tracker.domain.trips import TripStatus
from wellness_tracker.domain.workouts import WorkoutType


class MealTextRequest(BaseModel):
    """Freeform meal description."""

    text: str


class MealUpdateRequest(BaseModel):
    """Editable meal fields."""

    raw_text: str | None = None
    calories: int | None = Field(default=None, ge=0)
    protein: int | None = Field(default=None, ge=0)
    carbs: int | None = Field(default=None, ge=0)
    fat: int | None = Field(default=None, ge=0)


class WorkoutSaveRequest(BaseModel):
    """Payload for saving today's workout."""

    type: WorkoutType
    completed: bool = False


class TripCreateRequest(BaseModel):
    """Payload for a new trip."""

    destination: str
    country: str
    city: str
    start_date: date
    end_date: date
    accommodation: str | None = None
    flight_number: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    notes: str | None = None
    status: TripStatus | None = None


class TripUpdateRequest(BaseModel):
    """Partial trip update."""

    destination: str | None = None
    country: str | None = None
    city: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    accommodation: str | None = None
    flight_number: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    notes: str | None = None
    status: TripStatus | None = None
