"""
Time-off endpoints.

Leave requests with an inclusive date period and a review status.
"""

from datetime import date

from fastapi import APIRouter, Query, status

from workforce.api.v1 import problem_responses
from workforce.di import TimeOffServiceDep
from workforce.domain.exceptions import InvalidArgumentError
from workforce.models import CreateTimeOffRequest, TimeOffResponse, UpdateTimeOffRequest

router = APIRouter()


@router.post(
    "",
    response_model=TimeOffResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404),
)
async def create_time_off(
    request: CreateTimeOffRequest, service: TimeOffServiceDep
) -> TimeOffResponse:
    """
    Request time off.

    Args:
        request: User, period, type and optional reason
        service: Time-off service

    Returns:
        The created request with its user
    """
    return await service.create(request)


@router.get(
    "",
    response_model=list[TimeOffResponse],
    responses=problem_responses(400),
)
async def list_time_off(
    service: TimeOffServiceDep,
    start: date | None = Query(None, description="Period start (inclusive)"),
    end: date | None = Query(None, description="Period end (inclusive)"),
) -> list[TimeOffResponse]:
    """
    List time off, newest first.

    When ``start`` and ``end`` are given, only leave overlapping that period
    is returned.
    """
    if start is None and end is None:
        return await service.list_all()
    if start is None or end is None:
        raise InvalidArgumentError("start and end must be given together")
    return await service.list_between(start, end)


@router.get(
    "/user/{user_id}",
    response_model=list[TimeOffResponse],
    responses=problem_responses(400),
)
async def list_user_time_off(
    user_id: str, service: TimeOffServiceDep
) -> list[TimeOffResponse]:
    return await service.list_for_user(user_id)


@router.get(
    "/status/{time_off_status}",
    response_model=list[TimeOffResponse],
    responses=problem_responses(400),
)
async def list_time_off_by_status(
    time_off_status: str, service: TimeOffServiceDep
) -> list[TimeOffResponse]:
    """List time off in one status (Pending, Approved, Rejected)."""
    return await service.list_by_status(time_off_status)


@router.get(
    "/{time_off_id}",
    response_model=TimeOffResponse,
    responses=problem_responses(400, 404),
)
async def get_time_off(time_off_id: str, service: TimeOffServiceDep) -> TimeOffResponse:
    return await service.get(time_off_id)


@router.put(
    "/{time_off_id}",
    response_model=TimeOffResponse,
    responses=problem_responses(400, 404),
)
async def update_time_off(
    time_off_id: str, request: UpdateTimeOffRequest, service: TimeOffServiceDep
) -> TimeOffResponse:
    """Update a request, including its review status."""
    return await service.update(time_off_id, request)


@router.delete(
    "/{time_off_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_time_off(time_off_id: str, service: TimeOffServiceDep) -> None:
    await service.delete(time_off_id)
