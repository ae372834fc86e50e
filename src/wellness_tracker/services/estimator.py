"""Meal description nutrition estimator."""

import asyncio
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from wellness_tracker.domain.lexicon import FOOD_LEXICON, QUANTITY_LEXICON
from wellness_tracker.domain.nutrition import (
    FoodEntry,
    NutritionEstimate,
    round_half_up,
)

_FALLBACK_CONFIDENCE = 0.3
_MAX_CONFIDENCE = 0.9
_CONFIDENCE_PER_MATCH = 0.2
_FALLBACK_BASE_CALORIES = 100
_FALLBACK_CALORIES_PER_WORD = 50
_FALLBACK_MAX_CALORIES = 800
_MACRO_TOLERANCE = 0.2
_UNPARSED_MESSAGE = "Unable to parse meal"
_SEPARATOR = " • "

_logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class MealEstimator:
    """Keyword-based calorie and macro estimator.

    Foods are matched by substring against the lowercased description, so
    overlapping phrases ("chicken" and "chicken breast") both count. A
    quantity word directly before or after a food scales that food.
    """

    foods: Mapping[str, FoodEntry] = field(default_factory=lambda: FOOD_LEXICON)
    quantities: Mapping[str, float] = field(default_factory=lambda: QUANTITY_LEXICON)
    delay_seconds: float = 0.0

    def estimate(self, description: str) -> NutritionEstimate:
        """Estimate nutrition for a freeform meal description."""
        text = description.lower()
        calories = protein = carbs = fat = 0.0
        match_count = 0

        for food, entry in self.foods.items():
            if food not in text:
                continue
            multiplier = self._multiplier(text, food)
            calories += (entry.calories or 0) * multiplier
            protein += (entry.protein or 0) * multiplier
            carbs += (entry.carbs or 0) * multiplier
            fat += (entry.fat or 0) * multiplier
            match_count += 1

        if match_count == 0:
            estimate = _fallback_estimate(description)
        else:
            estimate = _reconcile(
                NutritionEstimate(
                    calories=round_half_up(calories),
                    protein=round_half_up(protein),
                    carbs=round_half_up(carbs),
                    fat=round_half_up(fat),
                    confidence=min(
                        _MAX_CONFIDENCE,
                        _FALLBACK_CONFIDENCE + match_count * _CONFIDENCE_PER_MATCH,
                    ),
                )
            )
        _logger.debug(
            "Meal estimate: matches=%s calories=%s confidence=%s",
            match_count,
            estimate.calories,
            estimate.confidence,
        )
        return estimate

    async def estimate_async(self, description: str) -> NutritionEstimate:
        """Estimate after the configured delay, for callers behind an await."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return self.estimate(description)

    def _multiplier(self, text: str, food: str) -> float:
        for word, value in self.quantities.items():
            if has_adjacent_quantity(text, food, word):
                return value
        return 1

def has_adjacent_quantity(text: str, food: str, word: str) -> bool:
    """Return True if ``word`` sits next to ``food`` with only whitespace between."""
    start = text.find(food)
    while start != -1:
        before = text[:start]
        trimmed = before.rstrip()
        if len(trimmed) < len(before) and trimmed.endswith(word):
            return True
        after = text[start + len(food) :]
        trimmed = after.lstrip()
        if len(trimmed) < len(after) and trimmed.startswith(word):
            return True
        start = text.find(food, start + 1)
    return False

def format_estimate(estimate: NutritionEstimate) -> str:
    """Render an estimate as a single display line."""
    if estimate.calories is None:
        return _UNPARSED_MESSAGE
    parts = [f"{_display(estimate.calories)} cal"]
    if estimate.protein is not None:
        parts.append(f"{_display(estimate.protein)}g protein")
    if estimate.carbs is not None:
        parts.append(f"{_display(estimate.carbs)}g carbs")
    if estimate.fat is not None:
        parts.append(f"{_display(estimate.fat)}g fat")
    return _SEPARATOR.join(parts)

def sum_estimates(estimates: Iterable[NutritionEstimate]) -> NutritionEstimate:
    """Sum estimates field by field, counting missing values as zero."""
    calories = protein = carbs = fat = 0
    for estimate in estimates:
        calories += estimate.calories or 0
        protein += estimate.protein or 0
        carbs += estimate.carbs or 0
        fat += estimate.fat or 0
    return NutritionEstimate(calories=calories, protein=protein, carbs=carbs, fat=fat)

def _fallback_estimate(description: str) -> NutritionEstimate:
    # Every single space separates a word, so "" is one word.
    words = len(description.split(" "))
    calories = min(
        _FALLBACK_BASE_CALORIES + words * _FALLBACK_CALORIES_PER_WORD,
        _FALLBACK_MAX_CALORIES,
    )
    return NutritionEstimate(
        calories=calories,
        protein=round_half_up(calories * 0.15 / 4),
        carbs=round_half_up(calories * 0.5 / 4),
        fat=round_half_up(calories * 0.35 / 9),
        confidence=_FALLBACK_CONFIDENCE,
    )

def _reconcile(estimate: NutritionEstimate) -> NutritionEstimate:
    """Scale macros so their calories land within tolerance of the total."""
    calories = estimate.calories or 0
    protein = estimate.protein or 0
    carbs = estimate.carbs or 0
    fat = estimate.fat or 0
    implied = protein * 4 + carbs * 4 + fat * 9
    if implied == 0 or abs(implied - calories) <= calories * _MACRO_TOLERANCE:
        return estimate
    ratio = calories / implied
    return NutritionEstimate(
        calories=estimate.calories,
        protein=round_half_up(protein * ratio),
        carbs=round_half_up(carbs * ratio),
        fat=round_half_up(fat * ratio),
        confidence=estimate.confidence,
    )

def _display(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
