"""Meal endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from wellness_tracker.api.dependencies import current_user_id, get_container
from wellness_tracker.api.models import MealTextRequest, MealUpdateRequest
from wellness_tracker.domain.meals import MealRecord, macro_percentages
from wellness_tracker.domain.nutrition import NutritionEstimate
from wellness_tracker.services.estimator import format_estimate

if TYPE_CHECKING:
    from wellness_tracker.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("/estimate")
async def estimate_meal(
    body: MealTextRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Estimate nutrition for a description without saving it."""
    container: AppContainer = get_container(request)
    estimate = await container.estimator.estimate_async(body.text)
    return _estimate_payload(estimate)


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_meal(
    body: MealTextRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Estimate and store a meal."""
    container: AppContainer = get_container(request)
    meal, estimate = await container.meal_service.log_meal(user_id, body.text)
    return {"meal": _meal_payload(meal), "estimate": _estimate_payload(estimate)}


@router.get("/today")
async def todays_meals(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return today's meals with daily totals."""
    container: AppContainer = get_container(request)
    meals = container.meal_service.list_today(user_id)
    totals = container.meal_service.today_totals(user_id)
    return {
        "meals": [_meal_payload(meal) for meal in meals],
        "totals": _estimate_payload(totals),
    }


@router.get("/stats")
async def daily_stats(
    request: Request,
    day: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return aggregate nutrition for a day (default today)."""
    container: AppContainer = get_container(request)
    resolved_day = day or container.meal_service.today()
    stats = container.meal_service.daily_stats(user_id, resolved_day)
    return {
        "day": stats.day.isoformat(),
        "total_calories": stats.total_calories,
        "total_protein": stats.total_protein,
        "total_carbs": stats.total_carbs,
        "total_fat": stats.total_fat,
        "meal_count": stats.meal_count,
    }


@router.get("/search")
async def search_meals(
    request: Request, q: str = "", user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Search meals by description text."""
    container: AppContainer = get_container(request)
    meals = container.meal_service.search_meals(user_id, q)
    return {"meals": [_meal_payload(meal) for meal in meals]}


@router.patch("/{meal_id}")
async def update_meal(
    meal_id: UUID,
    body: MealUpdateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Edit a stored meal."""
    container: AppContainer = get_container(request)
    meal = container.meal_service.update_meal(
        user_id, meal_id, body.model_dump(exclude_unset=True)
    )
    if meal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"meal": _meal_payload(meal)}


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> None:
    """Delete a stored meal."""
    container: AppContainer = get_container(request)
    container.meal_service.delete_meal(user_id, meal_id)


def _estimate_payload(estimate: NutritionEstimate) -> dict[str, object]:
    return {
        "calories": estimate.calories,
        "protein": estimate.protein,
        "carbs": estimate.carbs,
        "fat": estimate.fat,
        "confidence": estimate.confidence,
        "display": format_estimate(estimate),
    }


def _meal_payload(meal: MealRecord) -> dict[str, object]:
    percentages = macro_percentages(meal)
    return {
        "id": str(meal.id),
        "created_at": meal.created_at.isoformat(),
        "raw_text": meal.raw_text,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
        "display": format_estimate(meal.to_estimate()),
        "macro_percentages": (
            {
                "protein": percentages.protein,
                "carbs": percentages.carbs,
                "fat": percentages.fat,
            }
            if percentages
            else None
        ),
    }
