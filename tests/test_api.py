"""Tests for HTTP endpoints."""

from datetime import UTC, date, datetime, timedelta

from fastapi.testclient import TestClient

from wellness_tracker.api.app import create_app
from wellness_tracker.domain.workouts import WorkoutType
from tests.conftest import TEST_USER_ID


def test_health_is_public(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requests_without_token_are_rejected(container) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/meals/today")
    unknown = client.get("/meals/today", headers={"Authorization": "Bearer nope"})

    assert missing.status_code == 401
    assert unknown.status_code == 401


def test_estimate_endpoint_does_not_persist(
    container, meal_repository, auth_headers
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/estimate", json={"text": "chicken and rice"}, headers=auth_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["calories"] == 370
    assert data["display"] == "370 cal • 35g protein • 45g carbs • 4g fat"
    assert not meal_repository.meals


def test_log_meal_and_read_today(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    created = client.post("/meals", json={"text": "large salad"}, headers=auth_headers)
    client.post("/meals", json={"text": "chicken"}, headers=auth_headers)
    today = client.get("/meals/today", headers=auth_headers)

    assert created.status_code == 201
    assert created.json()["meal"]["calories"] == 30
    assert created.json()["estimate"]["confidence"] == 0.5
    body = today.json()
    assert len(body["meals"]) == 2
    assert body["totals"]["calories"] == 195
    assert body["totals"]["confidence"] is None


def test_log_blank_meal_returns_422(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals", json={"text": "  "}, headers=auth_headers)

    assert response.status_code == 422
    assert response.json() == {"detail": "Please enter a meal description"}


def test_meal_stats_update_search_delete(
    container, meal_repository, auth_headers
) -> None:
    client = TestClient(create_app(container))
    meal = meal_repository.add(
        TEST_USER_ID,
        "oatmeal with banana",
        calories=255,
        protein=6,
        carbs=54,
        fat=3,
        created_at=datetime(2024, 5, 1, 8, 0, tzinfo=UTC),
    )

    stats = client.get("/meals/stats?day=2024-05-01", headers=auth_headers)
    patched = client.patch(
        f"/meals/{meal.id}", json={"calories": 300}, headers=auth_headers
    )
    found = client.get("/meals/search?q=banana", headers=auth_headers)
    deleted = client.delete(f"/meals/{meal.id}", headers=auth_headers)
    missing = client.patch(
        f"/meals/{meal.id}", json={"calories": 1}, headers=auth_headers
    )

    assert stats.json()["meal_count"] == 1
    assert stats.json()["total_carbs"] == 54
    assert patched.json()["meal"]["calories"] == 300
    assert [m["raw_text"] for m in found.json()["meals"]] == ["oatmeal with banana"]
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_workout_endpoints(container, workout_repository, auth_headers) -> None:
    client = TestClient(create_app(container))
    workout_repository.create_workout(
        TEST_USER_ID,
        WorkoutType.PUSH,
        True,
        created_at=datetime.now(tz=UTC) - timedelta(days=2),
    )

    recommendation = client.get("/workouts/recommendation", headers=auth_headers)
    empty_today = client.get("/workouts/today", headers=auth_headers)
    saved = client.put(
        "/workouts/today",
        json={"type": "pull", "completed": True},
        headers=auth_headers,
    )
    recent = client.get("/workouts", headers=auth_headers)

    assert recommendation.json() == {"type": "pull"}
    assert empty_today.json() == {"workout": None}
    assert saved.json()["workout"]["type"] == "pull"
    assert saved.json()["workout"]["completed"] is True
    assert [w["type"] for w in recent.json()["workouts"]] == ["pull", "push"]


def test_trip_endpoints(container, auth_headers) -> None:
    client = TestClient(create_app(container))
    start = date.today() + timedelta(days=10)
    end = start + timedelta(days=4)

    created = client.post(
        "/trips",
        json={
            "destination": "Kyoto temples",
            "country": "Japan",
            "city": "Kyoto",
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "notes": "",
        },
        headers=auth_headers,
    )
    trip = created.json()["trip"]
    listed = client.get("/trips", headers=auth_headers)
    fetched = client.get(f"/trips/{trip['id']}", headers=auth_headers)
    patched = client.patch(
        f"/trips/{trip['id']}", json={"status": "cancelled"}, headers=auth_headers
    )

    assert created.status_code == 201
    assert trip["duration_days"] == 5
    assert trip["notes"] is None
    assert trip["status"] == "planned"
    assert [t["id"] for t in listed.json()["trips"]] == [trip["id"]]
    assert fetched.json()["trip"]["city"] == "Kyoto"
    assert patched.json()["trip"]["status"] == "cancelled"


def test_trip_with_reversed_dates_returns_422(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/trips",
        json={
            "destination": "Oslo",
            "country": "Norway",
            "city": "Oslo",
            "start_date": "2030-06-10",
            "end_date": "2030-06-01",
        },
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert response.json() == {"detail": "End date must be after start date"}
