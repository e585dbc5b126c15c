"""Trip endpoints."""

from datetime import datetime

from fastapi import APIRouter, Query, status

from workforce.api.v1 import problem_responses
from workforce.di import TripServiceDep
from workforce.domain.exceptions import InvalidArgumentError
from workforce.models import CreateTripRequest, TripResponse, UpdateTripRequest

router = APIRouter()


@router.post(
    "",
    response_model=TripResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404),
)
async def create_trip(request: CreateTripRequest, service: TripServiceDep) -> TripResponse:
    return await service.create(request)


@router.get("", response_model=list[TripResponse])
async def list_trips(service: TripServiceDep) -> list[TripResponse]:
    """List all trips, most recent departure first."""
    return await service.list_all()


@router.get(
    "/user/{user_id}",
    response_model=list[TripResponse],
    responses=problem_responses(400),
)
async def list_user_trips(
    user_id: str,
    service: TripServiceDep,
    start: datetime | None = Query(None, description="Departure window start"),
    end: datetime | None = Query(None, description="Departure window end"),
) -> list[TripResponse]:
    """
    List a user's trips, optionally limited to a departure window.

    Args:
        user_id: User identifier
        service: Trip service
        start: Window start (inclusive), requires ``end``
        end: Window end (inclusive), requires ``start``

    Returns:
        Matching trips, most recent departure first
    """
    if start is None and end is None:
        return await service.list_for_user(user_id)
    if start is None or end is None:
        raise InvalidArgumentError("start and end must be given together")
    return await service.list_for_user_between(user_id, start, end)


@router.get(
    "/{trip_id}", response_model=TripResponse, responses=problem_responses(400, 404)
)
async def get_trip(trip_id: str, service: TripServiceDep) -> TripResponse:
    return await service.get(trip_id)


@router.put(
    "/{trip_id}",
    response_model=TripResponse,
    responses=problem_responses(400, 404),
)
async def update_trip(
    trip_id: str, request: UpdateTripRequest, service: TripServiceDep
) -> TripResponse:
    """
    Update a trip.

    Send ``null`` for ``end_time`` or ``distance_km`` to clear them.
    """
    return await service.update(trip_id, request)


@router.delete(
    "/{trip_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_trip(trip_id: str, service: TripServiceDep) -> None:
    await service.delete(trip_id)
