"""Equipment request and response models."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from workforce.domain.entities import EquipmentStatus
from workforce.models.shared import ResponseModel
from workforce.models.user import UserResponse


class CreateEquipmentRequest(BaseModel):
    """
    Request to register equipment.

    Attributes:
        name: Display name
        serial_number: Unique serial number, optional
        assigned_to_user: Holder (UUID), optional
        status: Operational status (default Active)
        created_by: Registering user (UUID), optional
    """

    name: str = Field(..., min_length=1, max_length=100)
    serial_number: str | None = Field(None, min_length=1, max_length=50)
    assigned_to_user: str | None = None
    status: EquipmentStatus = EquipmentStatus.ACTIVE
    created_by: str | None = None


class UpdateEquipmentRequest(BaseModel):
    """Partial update; an explicit ``null`` clears the serial number or holder."""

    name: str | None = Field(None, min_length=1, max_length=100)
    serial_number: str | None = Field(None, min_length=1, max_length=50)
    assigned_to_user: str | None = None
    status: EquipmentStatus | None = None


class EquipmentResponse(ResponseModel):
    id: uuid.UUID
    name: str
    serial_number: str | None = None
    assigned_to_user: uuid.UUID | None = None
    status: EquipmentStatus
    created_by: uuid.UUID | None = None
    created_at: datetime
    updated_at: datetime
    user: UserResponse | None = None
