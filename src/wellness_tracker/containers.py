"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from wellness_tracker.adapters.supabase_auth_gateway import SupabaseAuthGateway
from wellness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from wellness_tracker.adapters.supabase_trip_repository import SupabaseTripRepository
from wellness_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from wellness_tracker.config import Settings, parse_timezone
from wellness_tracker.services.estimator import MealEstimator
from wellness_tracker.services.meals import MealService
from wellness_tracker.services.trips import TripService
from wellness_tracker.services.users import UserService
from wellness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    estimator: MealEstimator
    meal_service: MealService
    workout_service: WorkoutService
    trip_service: TripService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    timezone = parse_timezone(resolved_settings.timezone)
    estimator = MealEstimator(delay_seconds=resolved_settings.estimator_delay_seconds)
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(SupabaseAuthGateway(supabase_client)),
        estimator=estimator,
        meal_service=MealService(
            estimator=estimator,
            repository=SupabaseMealRepository(supabase_client),
            timezone=timezone,
        ),
        workout_service=WorkoutService(
            repository=SupabaseWorkoutRepository(supabase_client),
            timezone=timezone,
        ),
        trip_service=TripService(
            repository=SupabaseTripRepository(supabase_client),
            timezone=timezone,
        ),
    )
