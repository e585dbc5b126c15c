"""Time-off request and response models."""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from workforce.domain.entities import LeaveType, TimeOffStatus
from workforce.models.shared import ResponseModel
from workforce.models.user import UserResponse


class CreateTimeOffRequest(BaseModel):
    """
    Request to file a leave request.

    Attributes:
        user_id: Requesting user (UUID)
        leave_type: Kind of leave
        start_date: First day of leave
        end_date: Last day of leave (inclusive)
        reason: Free-form justification
        status: Approval status (default Pending)
        created_by: Filing user (UUID), optional
    """

    user_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str = ""
    status: TimeOffStatus = TimeOffStatus.PENDING
    created_by: str | None = None


class UpdateTimeOffRequest(BaseModel):
    """Partial update. Any status may be set at any time."""

    user_id: str | None = None
    leave_type: LeaveType | None = None
    start_date: date | None = None
    end_date: date | None = None
    reason: str | None = None
    status: TimeOffStatus | None = Field(None, description="Approval status")


class TimeOffResponse(ResponseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: TimeOffStatus
    created_by: uuid.UUID | None = None
    created_at: datetime
    updated_at: datetime
    user: UserResponse | None = None
