"""Crew and crew membership request and response models."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from workforce.models.shared import ResponseModel
from workforce.models.user import UserResponse


class CreateCrewRequest(BaseModel):
    crew_name: str = Field(..., min_length=1, max_length=100)
    created_by: str | None = Field(None, description="Creating user (UUID)")


class UpdateCrewRequest(BaseModel):
    crew_name: str | None = Field(None, min_length=1, max_length=100)


class AddCrewMemberRequest(BaseModel):
    """Request to add a user to a crew."""

    user_id: str = Field(..., description="User identifier (UUID)")


class CrewMemberResponse(ResponseModel):
    id: uuid.UUID
    crew_id: uuid.UUID
    user_id: uuid.UUID
    assigned_at: datetime
    user: UserResponse | None = None


class CrewResponse(ResponseModel):
    """Crew with its members (each with the member's user)."""

    id: uuid.UUID
    crew_name: str
    created_by: uuid.UUID | None = None
    created_at: datetime
    updated_at: datetime
    members: list[CrewMemberResponse] = Field(default_factory=list)
