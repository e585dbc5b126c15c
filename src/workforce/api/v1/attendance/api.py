"""
Attendance endpoints.

Check-in/check-out records per user. A user's records can be narrowed to
a creation-time window or to a single calendar day.
"""

from datetime import date, datetime

from fastapi import APIRouter, Query, status

from workforce.api.v1 import problem_responses
from workforce.di import AttendanceServiceDep
from workforce.domain.exceptions import InvalidArgumentError
from workforce.models import (
    AttendanceResponse,
    CreateAttendanceRequest,
    UpdateAttendanceRequest,
)

router = APIRouter()


@router.post(
    "",
    response_model=AttendanceResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404),
)
async def create_attendance(
    request: CreateAttendanceRequest, service: AttendanceServiceDep
) -> AttendanceResponse:
    return await service.create(request)


@router.get("", response_model=list[AttendanceResponse])
async def list_attendance(service: AttendanceServiceDep) -> list[AttendanceResponse]:
    """List all attendance records, newest first."""
    return await service.list_all()


@router.get(
    "/user/{user_id}",
    response_model=list[AttendanceResponse],
    responses=problem_responses(400),
)
async def list_user_attendance(
    user_id: str,
    service: AttendanceServiceDep,
    start: datetime | None = Query(None, description="Window start (inclusive)"),
    end: datetime | None = Query(None, description="Window end (inclusive)"),
) -> list[AttendanceResponse]:
    """
    List a user's attendance records, newest first.

    Args:
        user_id: User identifier
        service: Attendance service
        start: Optional creation-time window start, requires ``end``
        end: Optional creation-time window end, requires ``start``

    Returns:
        Matching records
    """
    if start is None and end is None:
        return await service.list_for_user(user_id)
    if start is None or end is None:
        raise InvalidArgumentError("start and end must be given together")
    return await service.list_for_user_between(user_id, start, end)


@router.get(
    "/user/{user_id}/day/{day}",
    response_model=AttendanceResponse,
    responses=problem_responses(400, 404),
)
async def get_user_attendance_for_day(
    user_id: str, day: date, service: AttendanceServiceDep
) -> AttendanceResponse:
    """Attendance a user recorded on a calendar day (UTC)."""
    return await service.find_for_day(user_id, day)


@router.get(
    "/{attendance_id}",
    response_model=AttendanceResponse,
    responses=problem_responses(400, 404),
)
async def get_attendance(
    attendance_id: str, service: AttendanceServiceDep
) -> AttendanceResponse:
    return await service.get(attendance_id)


@router.put(
    "/{attendance_id}",
    response_model=AttendanceResponse,
    responses=problem_responses(400, 404),
)
async def update_attendance(
    attendance_id: str,
    request: UpdateAttendanceRequest,
    service: AttendanceServiceDep,
) -> AttendanceResponse:
    return await service.update(attendance_id, request)


@router.delete(
    "/{attendance_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_attendance(attendance_id: str, service: AttendanceServiceDep) -> None:
    await service.delete(attendance_id)
