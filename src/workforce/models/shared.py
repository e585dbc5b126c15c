"""
Shared data models used across the application.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok", description="Service status")
    version: str = Field(..., description="Backend version")
    infrastructure_provider: str | None = Field(
        None, description="Active repository provider"
    )


class ResponseModel(BaseModel):
    """Base class for views built from domain entities."""

    model_config = ConfigDict(from_attributes=True)


class DeletedCountResponse(BaseModel):
    """Result of a bulk delete."""

    deleted: int = Field(..., ge=0, description="Number of records removed")
