"""User request and response models."""

import uuid
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from workforce.domain.entities import UserProfile, UserStatus
from workforce.models.role import RoleResponse
from workforce.models.shared import ResponseModel

MAX_EMAIL_LENGTH = 100


def _check_email_length(email: str) -> str:
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValueError(f"email must be at most {MAX_EMAIL_LENGTH} characters")
    return email


class CreateUserRequest(BaseModel):
    """
    Request to register a workforce user.

    Attributes:
        first_name: Given name
        last_name: Family name
        employee_id: Unique employee number
        email: Unique e-mail address
        phone: Contact phone number
        status: Employment status (default Active)
        profile: Functional profile (default Field Agent)
        role_id: Role to assign (UUID), optional
        created_by: Creating user (UUID), optional
    """

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    employee_id: str = Field(..., min_length=1, max_length=20)
    email: EmailStr
    phone: str = Field(default="", max_length=20)
    status: UserStatus = UserStatus.ACTIVE
    profile: UserProfile = UserProfile.FIELD_AGENT
    role_id: str | None = None
    created_by: str | None = None

    @field_validator("email")
    @classmethod
    def check_email_length(cls, v: str) -> str:
        return _check_email_length(v)


class UpdateUserRequest(BaseModel):
    """
    Partial user update.

    Omitted fields are left unchanged; an explicit ``null`` for ``role_id``
    unassigns the role.
    """

    first_name: str | None = Field(None, min_length=1, max_length=50)
    last_name: str | None = Field(None, min_length=1, max_length=50)
    employee_id: str | None = Field(None, min_length=1, max_length=20)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    status: UserStatus | None = None
    profile: UserProfile | None = None
    role_id: str | None = None

    @field_validator("email")
    @classmethod
    def check_email_length(cls, v: str | None) -> str | None:
        return v if v is None else _check_email_length(v)


class UserResponse(ResponseModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    employee_id: str
    email: str
    phone: str
    status: UserStatus
    profile: UserProfile
    role_id: uuid.UUID | None = None
    created_by: uuid.UUID | None = None
    created_at: datetime
    updated_at: datetime
    role: RoleResponse | None = None
