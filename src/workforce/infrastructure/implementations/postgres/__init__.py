"""SQLAlchemy (PostgreSQL) infrastructure implementations."""

from workforce.infrastructure.implementations.postgres.attendance_repository import (
    PostgresAttendanceRepository,
)
from workforce.infrastructure.implementations.postgres.crew_repository import (
    PostgresCrewMemberRepository,
    PostgresCrewRepository,
)
from workforce.infrastructure.implementations.postgres.database import (
    Database,
    create_engine,
)
from workforce.infrastructure.implementations.postgres.equipment_repository import (
    PostgresEquipmentRepository,
)
from workforce.infrastructure.implementations.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from workforce.infrastructure.implementations.postgres.role_repository import (
    PostgresRoleRepository,
)
from workforce.infrastructure.implementations.postgres.time_off_repository import (
    PostgresTimeOffRepository,
)
from workforce.infrastructure.implementations.postgres.trip_repository import (
    PostgresTripRepository,
)
from workforce.infrastructure.implementations.postgres.user_repository import (
    PostgresUserRepository,
)

__all__ = [
    "Database",
    "PostgresAttendanceRepository",
    "PostgresCrewMemberRepository",
    "PostgresCrewRepository",
    "PostgresEquipmentRepository",
    "PostgresPermissionRepository",
    "PostgresRoleRepository",
    "PostgresTimeOffRepository",
    "PostgresTripRepository",
    "PostgresUserRepository",
    "create_engine",
]
