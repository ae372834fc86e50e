"""Nutrition domain models."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionEstimate:
    """Calorie and macro estimate for a single meal.

    Every field is independently optional. ``confidence`` is only set when the
    estimate came from the meal estimator.
    """

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    confidence: float | None = None


@dataclass(frozen=True)
class FoodEntry:
    """Approximate macros for one lexicon food phrase."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, with halves going up."""
    return math.floor(value + 0.5)
