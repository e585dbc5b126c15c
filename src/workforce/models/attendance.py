"""Attendance request and response models."""

import uuid
from datetime import datetime

from pydantic import BaseModel

from workforce.domain.entities import AttendanceStatus
from workforce.models.shared import ResponseModel
from workforce.models.user import UserResponse


class CreateAttendanceRequest(BaseModel):
    """
    Request to record attendance.

    Attributes:
        user_id: Attending user (UUID)
        check_in: Check-in time, optional
        check_out: Check-out time, optional
        status: Attendance outcome (default Present)
        created_by: Recording user (UUID), optional
    """

    user_id: str
    check_in: datetime | None = None
    check_out: datetime | None = None
    status: AttendanceStatus = AttendanceStatus.PRESENT
    created_by: str | None = None


class UpdateAttendanceRequest(BaseModel):
    user_id: str | None = None
    check_in: datetime | None = None
    check_out: datetime | None = None
    status: AttendanceStatus | None = None


class AttendanceResponse(ResponseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    check_in: datetime | None = None
    check_out: datetime | None = None
    status: AttendanceStatus
    created_by: uuid.UUID | None = None
    created_at: datetime
    updated_at: datetime
    user: UserResponse | None = None
