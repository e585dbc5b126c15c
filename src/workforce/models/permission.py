"""Permission request and response models."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from workforce.models.role import RoleResponse
from workforce.models.shared import ResponseModel


class CreatePermissionRequest(BaseModel):
    """
    Request to grant CRUD flags on a module to a role.

    Attributes:
        role_id: Role receiving the permission
        module_name: Module the flags apply to
        can_create, can_read, can_update, can_delete: Capability flags
    """

    role_id: str = Field(..., description="Role identifier (UUID)")
    module_name: str = Field(..., min_length=1, max_length=50)
    can_create: bool = False
    can_read: bool = False
    can_update: bool = False
    can_delete: bool = False


class UpdatePermissionRequest(BaseModel):
    """Partial permission update. An explicit ``false`` revokes a flag."""

    role_id: str | None = None
    module_name: str | None = Field(None, min_length=1, max_length=50)
    can_create: bool | None = None
    can_read: bool | None = None
    can_update: bool | None = None
    can_delete: bool | None = None


class PermissionResponse(ResponseModel):
    id: uuid.UUID
    role_id: uuid.UUID
    module_name: str
    can_create: bool
    can_read: bool
    can_update: bool
    can_delete: bool
    created_at: datetime
    updated_at: datetime
    role: RoleResponse | None = None
