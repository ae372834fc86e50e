"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

import pytest

from wellness_tracker.config import Settings
from wellness_tracker.containers import AppContainer
from wellness_tracker.domain.meals import MealFilters, MealRecord, has_nutrition_info
from wellness_tracker.domain.nutrition import NutritionEstimate
from wellness_tracker.domain.trips import TripRecord, TripStatus
from wellness_tracker.domain.workouts import WorkoutRecord, WorkoutType
from wellness_tracker.services.estimator import MealEstimator
from wellness_tracker.services.meals import MealRepository, MealService
from wellness_tracker.services.trips import TripRepository, TripService
from wellness_tracker.services.users import AuthGateway, UserService
from wellness_tracker.services.workouts import WorkoutRepository, WorkoutService

TEST_TOKEN = "test-access-token"
TEST_USER_ID = UUID("11111111-1111-1111-1111-111111111111")


@dataclass
class FakeAuthGateway(AuthGateway):
    """Auth gateway that knows a fixed set of tokens."""

    tokens: dict[str, UUID] = field(default_factory=lambda: {TEST_TOKEN: TEST_USER_ID})

    def get_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealRecord] = field(default_factory=dict)

    def insert_meal(
        self, user_id: UUID, raw_text: str, estimate: NutritionEstimate
    ) -> MealRecord:
        return self.add(
            user_id,
            raw_text,
            calories=estimate.calories,
            protein=estimate.protein,
            carbs=estimate.carbs,
            fat=estimate.fat,
        )

    def add(  # noqa: PLR0913
        self,
        user_id: UUID,
        raw_text: str,
        calories: float | None = None,
        protein: float | None = None,
        carbs: float | None = None,
        fat: float | None = None,
        created_at: datetime | None = None,
    ) -> MealRecord:
        meal = MealRecord(
            id=uuid4(),
            user_id=user_id,
            created_at=created_at or datetime.now(tz=UTC),
            raw_text=raw_text,
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
        )
        self.meals[meal.id] = meal
        return meal

    def list_meals(self, user_id: UUID, filters: MealFilters) -> list[MealRecord]:
        results = [meal for meal in self.meals.values() if meal.user_id == user_id]
        if filters.date_from is not None:
            results = [m for m in results if m.created_at >= filters.date_from]
        if filters.date_to is not None:
            results = [m for m in results if m.created_at <= filters.date_to]
        if filters.has_nutrition:
            results = [m for m in results if has_nutrition_info(m)]
        return sorted(results, key=lambda meal: meal.created_at, reverse=True)

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        meal = self.meals.get(meal_id)
        if meal is None or meal.user_id != user_id:
            return None
        return meal

    def update_meal(
        self, user_id: UUID, meal_id: UUID, updates: dict[str, object]
    ) -> MealRecord | None:
        meal = self.get_meal(user_id, meal_id)
        if meal is None:
            return None
        updated = replace(meal, **updates)
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        if self.get_meal(user_id, meal_id):
            self.meals.pop(meal_id)

    def search_meals(self, user_id: UUID, text: str) -> list[MealRecord]:
        needle = text.lower()
        return [
            meal
            for meal in self.list_meals(user_id, MealFilters())
            if needle in meal.raw_text.lower()
        ]


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    workouts: dict[UUID, WorkoutRecord] = field(default_factory=dict)
    fail_reads: bool = False

    def create_workout(
        self,
        user_id: UUID,
        workout_type: WorkoutType,
        completed: bool,
        created_at: datetime | None = None,
    ) -> WorkoutRecord:
        workout = WorkoutRecord(
            id=uuid4(),
            user_id=user_id,
            created_at=created_at or datetime.now(tz=UTC),
            type=workout_type,
            completed=completed,
        )
        self.workouts[workout.id] = workout
        return workout

    def list_recent(self, user_id: UUID, limit: int) -> list[WorkoutRecord]:
        if self.fail_reads:
            raise RuntimeError("database unavailable")
        results = [w for w in self.workouts.values() if w.user_id == user_id]
        return sorted(results, key=lambda w: w.created_at, reverse=True)[:limit]

    def get_between(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> WorkoutRecord | None:
        for workout in self.list_recent(user_id, len(self.workouts)):
            if start <= workout.created_at < end:
                return workout
        return None

    def update_workout(
        self, user_id: UUID, workout_id: UUID, updates: dict[str, object]
    ) -> WorkoutRecord:
        current = self.workouts[workout_id]
        updated = replace(
            current,
            type=WorkoutType(updates.get("type", current.type)),
            completed=bool(updates.get("completed", current.completed)),
        )
        self.workouts[workout_id] = updated
        return updated


@dataclass
class InMemoryTripRepository(TripRepository):
    """In-memory trip repository for tests."""

    trips: dict[UUID, TripRecord] = field(default_factory=dict)
    created_payloads: list[dict[str, object]] = field(default_factory=list)

    def create_trip(self, user_id: UUID, payload: dict[str, object]) -> TripRecord:
        self.created_payloads.append(payload)
        trip = TripRecord(
            id=uuid4(),
            user_id=user_id,
            created_at=datetime.now(tz=UTC),
            **payload,
        )
        self.trips[trip.id] = trip
        return trip

    def list_upcoming(self, user_id: UUID, today: date) -> list[TripRecord]:
        results = [
            trip
            for trip in self.trips.values()
            if trip.user_id == user_id and trip.end_date >= today
        ]
        return sorted(results, key=lambda trip: trip.start_date)

    def list_all(self, user_id: UUID) -> list[TripRecord]:
        results = [trip for trip in self.trips.values() if trip.user_id == user_id]
        return sorted(results, key=lambda trip: trip.start_date, reverse=True)

    def get_trip(self, user_id: UUID, trip_id: UUID) -> TripRecord | None:
        trip = self.trips.get(trip_id)
        if trip is None or trip.user_id != user_id:
            return None
        return trip

    def update_trip(
        self, user_id: UUID, trip_id: UUID, payload: dict[str, object]
    ) -> TripRecord | None:
        trip = self.get_trip(user_id, trip_id)
        if trip is None:
            return None
        updated = replace(trip, **payload)
        self.trips[trip_id] = updated
        return updated

    def delete_trip(self, user_id: UUID, trip_id: UUID) -> None:
        if self.get_trip(user_id, trip_id):
            self.trips.pop(trip_id)


def trip_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "destination": "Lisbon getaway",
        "country": "Portugal",
        "city": "Lisbon",
        "start_date": date(2030, 3, 5),
        "end_date": date(2030, 3, 9),
        "status": TripStatus.PLANNED,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        timezone="UTC",
    )


@pytest.fixture
def utc() -> ZoneInfo:
    return ZoneInfo("UTC")


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def workout_repository() -> InMemoryWorkoutRepository:
    return InMemoryWorkoutRepository()


@pytest.fixture
def trip_repository() -> InMemoryTripRepository:
    return InMemoryTripRepository()


@pytest.fixture
def container(
    settings: Settings,
    utc: ZoneInfo,
    meal_repository: InMemoryMealRepository,
    workout_repository: InMemoryWorkoutRepository,
    trip_repository: InMemoryTripRepository,
) -> AppContainer:
    estimator = MealEstimator()
    return AppContainer(
        settings=settings,
        user_service=UserService(FakeAuthGateway()),
        estimator=estimator,
        meal_service=MealService(
            estimator=estimator, repository=meal_repository, timezone=utc
        ),
        workout_service=WorkoutService(repository=workout_repository, timezone=utc),
        trip_service=TripService(repository=trip_repository, timezone=utc),
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
