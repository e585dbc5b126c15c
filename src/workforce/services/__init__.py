"""Domain services, one per entity family."""

from workforce.services.attendance_service import AttendanceService
from workforce.services.crew_service import CrewService
from workforce.services.equipment_service import EquipmentService
from workforce.services.permission_service import PermissionService
from workforce.services.role_service import RoleService
from workforce.services.time_off_service import TimeOffService
from workforce.services.trip_service import TripService
from workforce.services.user_service import UserService

__all__ = [
    "AttendanceService",
    "CrewService",
    "EquipmentService",
    "PermissionService",
    "RoleService",
    "TimeOffService",
    "TripService",
    "UserService",
]
