"""Role request and response models."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from workforce.models.shared import ResponseModel


class CreateRoleRequest(BaseModel):
    """
    Request to create a role.

    Attributes:
        role_name: Unique role name
        description: Optional free-form description
    """

    role_name: str = Field(..., min_length=1, max_length=50, description="Role name")
    description: str = Field(default="", max_length=255, description="Description")


class UpdateRoleRequest(BaseModel):
    """Partial role update; omitted fields are left unchanged."""

    role_name: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = Field(None, max_length=255)


class RoleResponse(ResponseModel):
    id: uuid.UUID
    role_name: str
    description: str
    created_at: datetime
    updated_at: datetime
