"""Tests for estimate formatting and totals."""

from wellness_tracker.domain.nutrition import NutritionEstimate
from wellness_tracker.services.estimator import format_estimate, sum_estimates


def test_format_full_estimate() -> None:
    estimate = NutritionEstimate(calories=500, protein=30, carbs=50, fat=20)

    assert format_estimate(estimate) == "500 cal • 30g protein • 50g carbs • 20g fat"


def test_format_partial_estimate() -> None:
    estimate = NutritionEstimate(calories=300, protein=20)

    assert format_estimate(estimate) == "300 cal • 20g protein"


def test_format_only_calories() -> None:
    assert format_estimate(NutritionEstimate(calories=250)) == "250 cal"


def test_format_without_calories() -> None:
    estimate = NutritionEstimate(calories=None, protein=10, carbs=5, fat=1)

    assert format_estimate(estimate) == "Unable to parse meal"


def test_format_keeps_zero_values() -> None:
    estimate = NutritionEstimate(calories=2, protein=0, carbs=0, fat=0)

    assert format_estimate(estimate) == "2 cal • 0g protein • 0g carbs • 0g fat"


def test_sum_multiple_estimates() -> None:
    totals = sum_estimates(
        [
            NutritionEstimate(calories=300, protein=20, carbs=30, fat=10),
            NutritionEstimate(calories=400, protein=30, carbs=40, fat=15),
            NutritionEstimate(calories=200, protein=15, carbs=25, fat=5),
        ]
    )

    assert totals == NutritionEstimate(calories=900, protein=65, carbs=95, fat=30)


def test_sum_treats_missing_as_zero() -> None:
    totals = sum_estimates(
        [
            NutritionEstimate(calories=300, carbs=30),
            NutritionEstimate(protein=20, fat=10),
        ]
    )

    assert totals == NutritionEstimate(calories=300, protein=20, carbs=30, fat=10)


def test_sum_empty_is_all_zero() -> None:
    totals = sum_estimates([])

    assert (totals.calories, totals.protein, totals.carbs, totals.fat) == (0, 0, 0, 0)
    assert totals.confidence is None


def test_sum_drops_confidence_and_is_order_independent() -> None:
    first = NutritionEstimate(calories=100, protein=5, carbs=10, fat=2, confidence=0.5)
    second = NutritionEstimate(calories=50, fat=1, confidence=0.9)

    forward = sum_estimates([first, second])
    backward = sum_estimates([second, first])
    nested = sum_estimates([sum_estimates([first]), sum_estimates([second])])

    assert forward == backward == nested
    assert forward.confidence is None
