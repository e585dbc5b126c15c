"""Abstract repository interfaces for workforce persistence."""

from workforce.infrastructure.repositories.attendance_repository import (
    AttendanceRepository,
)
from workforce.infrastructure.repositories.crew_repository import (
    CrewMemberRepository,
    CrewRepository,
)
from workforce.infrastructure.repositories.equipment_repository import (
    EquipmentRepository,
)
from workforce.infrastructure.repositories.permission_repository import (
    PermissionRepository,
)
from workforce.infrastructure.repositories.role_repository import RoleRepository
from workforce.infrastructure.repositories.time_off_repository import (
    TimeOffRepository,
)
from workforce.infrastructure.repositories.trip_repository import TripRepository
from workforce.infrastructure.repositories.user_repository import UserRepository

__all__ = [
    "AttendanceRepository",
    "CrewMemberRepository",
    "CrewRepository",
    "EquipmentRepository",
    "PermissionRepository",
    "RoleRepository",
    "TimeOffRepository",
    "TripRepository",
    "UserRepository",
]
