"""Tests for container wiring."""

from wellness_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.meal_service.estimator is container.estimator
    assert container.workout_service is not None
    assert str(container.trip_service.timezone) == "UTC"
