"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from wellness_tracker.domain.nutrition import NutritionEstimate


@dataclass(frozen=True)
class MealRecord:
    """Meal row as stored in the database."""

    id: UUID
    user_id: UUID
    created_at: datetime
    raw_text: str
    calories: int | None
    protein: int | None
    carbs: int | None
    fat: int | None

    def to_estimate(self) -> NutritionEstimate:
        """Return the stored values as an estimate without confidence."""
        return NutritionEstimate(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


@dataclass(frozen=True)
class MealFilters:
    """Optional filters for listing meals."""

    date_from: datetime | None = None
    date_to: datetime | None = None
    has_nutrition: bool = False


@dataclass(frozen=True)
class MealStats:
    """Aggregate nutrition for one day."""

    day: date
    total_calories: int
    total_protein: int
    total_carbs: int
    total_fat: int
    meal_count: int


@dataclass(frozen=True)
class MacroPercentages:
    """Share of macro calories per macronutrient, in whole percent."""

    protein: int
    carbs: int
    fat: int


def has_nutrition_info(meal: MealRecord) -> bool:
    """Return True when all four nutrition fields are known."""
    return (
        meal.calories is not None
        and meal.protein is not None
        and meal.carbs is not None
        and meal.fat is not None
    )


def macro_percentages(meal: MealRecord) -> MacroPercentages | None:
    """Split macro calories into protein, carbs and fat percentages."""
    if not has_nutrition_info(meal):
        return None
    protein_calories = (meal.protein or 0) * 4
    carbs_calories = (meal.carbs or 0) * 4
    fat_calories = (meal.fat or 0) * 9
    total = protein_calories + carbs_calories + fat_calories
    if total == 0:
        return None
    return MacroPercentages(
        protein=round(protein_calories / total * 100),
        carbs=round(carbs_calories / total * 100),
        fat=round(fat_calories / total * 100),
    )
