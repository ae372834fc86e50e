"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from wellness_tracker.domain.meals import MealFilters, MealRecord, MealStats
from wellness_tracker.domain.nutrition import NutritionEstimate
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.days import day_bounds, local_today
from wellness_tracker.services.estimator import MealEstimator, sum_estimates

_EDITABLE_FIELDS = ("raw_text", "calories", "protein", "carbs", "fat")

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def insert_meal(
        self, user_id: UUID, raw_text: str, estimate: NutritionEstimate
    ) -> MealRecord:
        """Insert a meal row and return it."""

    def list_meals(self, user_id: UUID, filters: MealFilters) -> list[MealRecord]:
        """Return a user's meals, newest first."""

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id."""

    def update_meal(
        self, user_id: UUID, meal_id: UUID, updates: dict[str, object]
    ) -> MealRecord | None:
        """Update a meal and return the new row."""

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal."""

    def search_meals(self, user_id: UUID, text: str) -> list[MealRecord]:
        """Return meals whose text contains ``text``, case-insensitively."""


@dataclass
class MealService:
    """Service that estimates nutrition for meals and stores them."""

    estimator: MealEstimator
    repository: MealRepository
    timezone: ZoneInfo

    async def log_meal(
        self, user_id: UUID, raw_text: str
    ) -> tuple[MealRecord, NutritionEstimate]:
        """Estimate a meal description and persist it."""
        if not raw_text.strip():
            raise ValidationError("Please enter a meal description")
        estimate = await self.estimator.estimate_async(raw_text)
        meal = self.repository.insert_meal(user_id, raw_text, estimate)
        _logger.info(
            "Meal logged: user=%s meal=%s calories=%s",
            user_id,
            meal.id,
            meal.calories,
        )
        return meal, estimate

    def today(self) -> date:
        """Return the current local date."""
        return local_today(self.timezone)

    def list_today(self, user_id: UUID) -> list[MealRecord]:
        """Return meals logged since local midnight."""
        start, _ = day_bounds(self.today(), self.timezone)
        return self.repository.list_meals(user_id, MealFilters(date_from=start))

    def today_totals(self, user_id: UUID) -> NutritionEstimate:
        """Return summed nutrition for today's meals."""
        return sum_estimates(meal.to_estimate() for meal in self.list_today(user_id))

    def daily_stats(self, user_id: UUID, day: date) -> MealStats:
        """Return aggregate nutrition for a local day."""
        start, end = day_bounds(day, self.timezone)
        meals = self.repository.list_meals(
            user_id,
            MealFilters(date_from=start, date_to=end - timedelta(microseconds=1)),
        )
        totals = sum_estimates(meal.to_estimate() for meal in meals)
        return MealStats(
            day=day,
            total_calories=int(totals.calories or 0),
            total_protein=int(totals.protein or 0),
            total_carbs=int(totals.carbs or 0),
            total_fat=int(totals.fat or 0),
            meal_count=len(meals),
        )

    def list_meals(
        self, user_id: UUID, filters: MealFilters | None = None
    ) -> list[MealRecord]:
        """Return a user's meals, newest first."""
        return self.repository.list_meals(user_id, filters or MealFilters())

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id."""
        return self.repository.get_meal(user_id, meal_id)

    def update_meal(
        self, user_id: UUID, meal_id: UUID, updates: dict[str, object]
    ) -> MealRecord | None:
        """Apply validated edits to a stored meal."""
        cleaned = _clean_updates(updates)
        if not cleaned:
            return self.repository.get_meal(user_id, meal_id)
        return self.repository.update_meal(user_id, meal_id, cleaned)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal."""
        self.repository.delete_meal(user_id, meal_id)
        _logger.info("Meal deleted: user=%s meal=%s", user_id, meal_id)

    def search_meals(self, user_id: UUID, text: str) -> list[MealRecord]:
        """Search meals by description."""
        query = text.strip()
        if not query:
            return []
        return self.repository.search_meals(user_id, query)


def _clean_updates(updates: dict[str, object]) -> dict[str, object]:
    cleaned: dict[str, object] = {}
    for key in _EDITABLE_FIELDS:
        if key not in updates:
            continue
        value = updates[key]
        if key == "raw_text":
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("Please enter a meal description")
        elif value is not None:
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ValidationError(f"{key} must be a number")
            if value < 0:
                raise ValidationError(f"{key} must be a non-negative number")
        cleaned[key] = value
    return cleaned
