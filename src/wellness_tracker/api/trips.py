"""Trip endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from wellness_tracker.api.dependencies import current_user_id, get_container
from wellness_tracker.api.models import TripCreateRequest, TripUpdateRequest
from wellness_tracker.domain.trips import (
    TripRecord,
    format_date_range,
    format_time,
    trip_duration_days,
)

if TYPE_CHECKING:
    from wellness_tracker.containers import AppContainer

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("")
async def list_trips(
    request: Request, upcoming: bool = True, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return upcoming trips, or every trip when ``upcoming`` is false."""
    container: AppContainer = get_container(request)
    service = container.trip_service
    trips = service.upcoming(user_id) if upcoming else service.all(user_id)
    return {"trips": [_trip_payload(trip) for trip in trips]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_trip(
    body: TripCreateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Create a trip."""
    container: AppContainer = get_container(request)
    trip = container.trip_service.create(user_id, body.model_dump(exclude_none=True))
    return {"trip": _trip_payload(trip)}


@router.get("/{trip_id}")
async def get_trip(
    trip_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return a single trip."""
    container: AppContainer = get_container(request)
    trip = container.trip_service.get(user_id, trip_id)
    if trip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"trip": _trip_payload(trip)}


@router.patch("/{trip_id}")
async def update_trip(
    trip_id: UUID,
    body: TripUpdateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Edit a trip."""
    container: AppContainer = get_container(request)
    trip = container.trip_service.update(
        user_id, trip_id, body.model_dump(exclude_unset=True)
    )
    if trip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"trip": _trip_payload(trip)}


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> None:
    """Delete a trip."""
    container: AppContainer = get_container(request)
    container.trip_service.delete(user_id, trip_id)


def _trip_payload(trip: TripRecord) -> dict[str, object]:
    return {
        "id": str(trip.id),
        "destination": trip.destination,
        "country": trip.country,
        "city": trip.city,
        "accommodation": trip.accommodation,
        "start_date": trip.start_date.isoformat(),
        "end_date": trip.end_date.isoformat(),
        "flight_number": trip.flight_number,
        "departure_airport": trip.departure_airport,
        "arrival_airport": trip.arrival_airport,
        "departure_time": format_time(trip.departure_time),
        "arrival_time": format_time(trip.arrival_time),
        "notes": trip.notes,
        "status": trip.status.value,
        "duration_days": trip_duration_days(trip.start_date, trip.end_date),
        "date_range": format_date_range(trip.start_date, trip.end_date),
    }
