"""Global pytest configuration and fixtures for all tests."""

import os

# Settings are read when workforce.config is first imported, so the test
# environment has to be in place before any test module imports the package.
os.environ.update(
    {
        "INFRASTRUCTURE_PROVIDER": "memory",
        "EVENT_PUBLISHER_PROVIDER": "memory",
        "ENABLE_DOCS": "true",
        "DEBUG": "false",
        "OTEL_ENABLED": "false",
    }
)

import pytest  # noqa: E402

from workforce.infrastructure import InfrastructureFactory  # noqa: E402
from workforce.infrastructure.implementations.memory import (  # noqa: E402
    MemoryEventPublisher,
)
from workforce.models import (  # noqa: E402
    CreateRoleRequest,
    CreateUserRequest,
)
from workforce.services import (  # noqa: E402
    AttendanceService,
    CrewService,
    EquipmentService,
    PermissionService,
    RoleService,
    TimeOffService,
    TripService,
    UserService,
)


@pytest.fixture
def factory() -> InfrastructureFactory:
    """Memory-backed factory; every repository it hands out shares one store."""
    return InfrastructureFactory(provider="memory")


@pytest.fixture
def publisher() -> MemoryEventPublisher:
    return MemoryEventPublisher()


@pytest.fixture
def role_service(factory, publisher) -> RoleService:
    return RoleService(factory.get_role_repository(), publisher)


@pytest.fixture
def permission_service(factory, publisher) -> PermissionService:
    return PermissionService(
        factory.get_permission_repository(), factory.get_role_repository(), publisher
    )


@pytest.fixture
def user_service(factory, publisher) -> UserService:
    return UserService(
        factory.get_user_repository(), factory.get_role_repository(), publisher
    )


@pytest.fixture
def crew_service(factory, publisher) -> CrewService:
    return CrewService(
        factory.get_crew_repository(),
        factory.get_crew_member_repository(),
        factory.get_user_repository(),
        publisher,
    )


@pytest.fixture
def equipment_service(factory, publisher) -> EquipmentService:
    return EquipmentService(
        factory.get_equipment_repository(), factory.get_user_repository(), publisher
    )


@pytest.fixture
def attendance_service(factory, publisher) -> AttendanceService:
    return AttendanceService(
        factory.get_attendance_repository(), factory.get_user_repository(), publisher
    )


@pytest.fixture
def time_off_service(factory, publisher) -> TimeOffService:
    return TimeOffService(
        factory.get_time_off_repository(), factory.get_user_repository(), publisher
    )


@pytest.fixture
def trip_service(factory, publisher) -> TripService:
    return TripService(
        factory.get_trip_repository(), factory.get_user_repository(), publisher
    )


@pytest.fixture
async def supervisor(role_service):
    """A stored role named Supervisor."""
    return await role_service.create(
        CreateRoleRequest(role_name="Supervisor", description="Field supervisor")
    )


@pytest.fixture
async def worker(user_service):
    """A stored user without a role."""
    return await user_service.create(
        CreateUserRequest(
            first_name="Ana",
            last_name="Lopez",
            employee_id="E-100",
            email="ana.lopez@acme.io",
        )
    )
