"""
Models package.

Request and response (view) models for every entity family, plus the shared
RFC 7807 error and health models.
"""

from workforce.models.attendance import (
    AttendanceResponse,
    CreateAttendanceRequest,
    UpdateAttendanceRequest,
)
from workforce.models.crew import (
    AddCrewMemberRequest,
    CreateCrewRequest,
    CrewMemberResponse,
    CrewResponse,
    UpdateCrewRequest,
)
from workforce.models.equipment import (
    CreateEquipmentRequest,
    EquipmentResponse,
    UpdateEquipmentRequest,
)
from workforce.models.errors import ProblemDetail, ValidationErrorDetail
from workforce.models.permission import (
    CreatePermissionRequest,
    PermissionResponse,
    UpdatePermissionRequest,
)
from workforce.models.role import CreateRoleRequest, RoleResponse, UpdateRoleRequest
from workforce.models.shared import DeletedCountResponse, HealthResponse
from workforce.models.time_off import (
    CreateTimeOffRequest,
    TimeOffResponse,
    UpdateTimeOffRequest,
)
from workforce.models.trip import CreateTripRequest, TripResponse, UpdateTripRequest
from workforce.models.user import CreateUserRequest, UpdateUserRequest, UserResponse

__all__ = [
    "AddCrewMemberRequest",
    "AttendanceResponse",
    "CreateAttendanceRequest",
    "CreateCrewRequest",
    "CreateEquipmentRequest",
    "CreatePermissionRequest",
    "CreateRoleRequest",
    "CreateTimeOffRequest",
    "CreateTripRequest",
    "CreateUserRequest",
    "DeletedCountResponse",
    "CrewMemberResponse",
    "CrewResponse",
    "EquipmentResponse",
    "HealthResponse",
    "PermissionResponse",
    "ProblemDetail",
    "RoleResponse",
    "TimeOffResponse",
    "TripResponse",
    "UpdateAttendanceRequest",
    "UpdateCrewRequest",
    "UpdateEquipmentRequest",
    "UpdatePermissionRequest",
    "UpdateRoleRequest",
    "UpdateTimeOffRequest",
    "UpdateTripRequest",
    "UpdateUserRequest",
    "UserResponse",
    "ValidationErrorDetail",
]
