"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from wellness_tracker.domain.meals import MealFilters, MealRecord
from wellness_tracker.domain.nutrition import NutritionEstimate, round_half_up
from wellness_tracker.errors import RepositoryError
from wellness_tracker.services.meals import MealRepository

_COLUMNS = "id, user_id, created_at, raw_text, calories, protein, carbs, fat"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for the meals table."""

    client: Client

    def insert_meal(
        self, user_id: UUID, raw_text: str, estimate: NutritionEstimate
    ) -> MealRecord:
        """Insert a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "raw_text": raw_text,
                    "calories": _to_int(estimate.calories),
                    "protein": _to_int(estimate.protein),
                    "carbs": _to_int(estimate.carbs),
                    "fat": _to_int(estimate.fat),
                }
            )
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to create meal")
        return _parse_row(response.data[0])

    def list_meals(self, user_id: UUID, filters: MealFilters) -> list[MealRecord]:
        """Return a user's meals, newest first."""
        query = self.client.table("meals").select(_COLUMNS).eq("user_id", str(user_id))
        if filters.date_from is not None:
            query = query.gte("created_at", filters.date_from.isoformat())
        if filters.date_to is not None:
            query = query.lte("created_at", filters.date_to.isoformat())
        if filters.has_nutrition:
            for column in ("calories", "protein", "carbs", "fat"):
                query = query.not_.is_(column, "null")
        response = query.order("created_at", desc=True).execute()
        return [_parse_row(row) for row in response.data or []]

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_meal(
        self, user_id: UUID, meal_id: UUID, updates: dict[str, object]
    ) -> MealRecord | None:
        """Update a meal and return the new row."""
        payload = {
            key: _to_int(value) if key != "raw_text" else value
            for key, value in updates.items()
        }
        response = (
            self.client.table("meals")
            .update(payload)
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal."""
        self.client.table("meals").delete().eq("id", str(meal_id)).eq(
            "user_id", str(user_id)
        ).execute()

    def search_meals(self, user_id: UUID, text: str) -> list[MealRecord]:
        """Return meals whose text contains ``text``."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .ilike("raw_text", f"%{text}%")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        raw_text=str(row.get("raw_text") or ""),
        calories=_to_int(row.get("calories")),
        protein=_to_int(row.get("protein")),
        carbs=_to_int(row.get("carbs")),
        fat=_to_int(row.get("fat")),
    )


def _to_int(value: object) -> int | None:
    if value is None:
        return None
    return round_half_up(float(value))
