"""Trip request and response models."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from workforce.models.shared import ResponseModel
from workforce.models.user import UserResponse


class CreateTripRequest(BaseModel):
    """
    Request to record a business trip.

    Attributes:
        user_id: Travelling user (UUID)
        start_location: Origin
        end_location: Destination
        start_time: Departure time
        end_time: Arrival time, optional
        purpose: Free-form purpose
        distance_km: Travelled distance, never negative
        created_by: Recording user (UUID), optional
    """

    user_id: str
    start_location: str = Field(..., min_length=1, max_length=255)
    end_location: str = Field(..., min_length=1, max_length=255)
    start_time: datetime
    end_time: datetime | None = None
    purpose: str = ""
    distance_km: float | None = Field(None, ge=0)
    created_by: str | None = None


class UpdateTripRequest(BaseModel):
    user_id: str | None = None
    start_location: str | None = Field(None, min_length=1, max_length=255)
    end_location: str | None = Field(None, min_length=1, max_length=255)
    start_time: datetime | None = None
    end_time: datetime | None = None
    purpose: str | None = None
    distance_km: float | None = Field(None, ge=0)


class TripResponse(ResponseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    start_location: str
    end_location: str
    start_time: datetime
    end_time: datetime | None = None
    purpose: str
    distance_km: float | None = None
    created_by: uuid.UUID | None = None
    created_at: datetime
    updated_at: datetime
    user: UserResponse | None = None
