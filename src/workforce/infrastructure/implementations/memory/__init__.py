"""In-memory infrastructure implementations for development and tests."""

from workforce.infrastructure.implementations.memory.attendance_repository import (
    MemoryAttendanceRepository,
)
from workforce.infrastructure.implementations.memory.crew_repository import (
    MemoryCrewMemberRepository,
    MemoryCrewRepository,
)
from workforce.infrastructure.implementations.memory.equipment_repository import (
    MemoryEquipmentRepository,
)
from workforce.infrastructure.implementations.memory.event_publisher import (
    MemoryEventPublisher,
)
from workforce.infrastructure.implementations.memory.permission_repository import (
    MemoryPermissionRepository,
)
from workforce.infrastructure.implementations.memory.role_repository import (
    MemoryRoleRepository,
)
from workforce.infrastructure.implementations.memory.store import MemoryStore
from workforce.infrastructure.implementations.memory.time_off_repository import (
    MemoryTimeOffRepository,
)
from workforce.infrastructure.implementations.memory.trip_repository import (
    MemoryTripRepository,
)
from workforce.infrastructure.implementations.memory.user_repository import (
    MemoryUserRepository,
)

__all__ = [
    "MemoryAttendanceRepository",
    "MemoryCrewMemberRepository",
    "MemoryCrewRepository",
    "MemoryEquipmentRepository",
    "MemoryEventPublisher",
    "MemoryPermissionRepository",
    "MemoryRoleRepository",
    "MemoryStore",
    "MemoryTimeOffRepository",
    "MemoryTripRepository",
    "MemoryUserRepository",
]
