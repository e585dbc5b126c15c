"""
Dependency injection container for the workforce backend.

Centralizes dependency injection using FastAPI's Depends with
typing.Annotated. The infrastructure factory is built once by the lifespan
handler and kept on ``app.state``; services are cheap and built per request.
"""

from typing import Annotated

from fastapi import Depends, Request

from workforce.config import Settings, get_settings
from workforce.infrastructure import InfrastructureFactory
from workforce.services import (
    AttendanceService,
    CrewService,
    EquipmentService,
    PermissionService,
    RoleService,
    TimeOffService,
    TripService,
    UserService,
)

# ============================================================================
# Settings Dependencies
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""


# ============================================================================
# Infrastructure Dependencies
# ============================================================================


def get_infrastructure_factory(request: Request) -> InfrastructureFactory:
    """
    Get the process-wide infrastructure factory.

    Args:
        request: Current request (gives access to ``app.state``)

    Returns:
        Factory created at application start-up
    """
    return request.app.state.infrastructure_factory


InfrastructureFactoryDep = Annotated[
    InfrastructureFactory, Depends(get_infrastructure_factory)
]
"""Injected InfrastructureFactory instance."""


# ============================================================================
# Domain Service Dependencies
# ============================================================================


def get_role_service(factory: InfrastructureFactoryDep) -> RoleService:
    return RoleService(factory.get_role_repository(), factory.get_event_publisher())


RoleServiceDep = Annotated[RoleService, Depends(get_role_service)]


def get_permission_service(factory: InfrastructureFactoryDep) -> PermissionService:
    return PermissionService(
        factory.get_permission_repository(),
        factory.get_role_repository(),
        factory.get_event_publisher(),
    )


PermissionServiceDep = Annotated[PermissionService, Depends(get_permission_service)]


def get_user_service(factory: InfrastructureFactoryDep) -> UserService:
    return UserService(
        factory.get_user_repository(),
        factory.get_role_repository(),
        factory.get_event_publisher(),
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def get_crew_service(factory: InfrastructureFactoryDep) -> CrewService:
    return CrewService(
        factory.get_crew_repository(),
        factory.get_crew_member_repository(),
        factory.get_user_repository(),
        factory.get_event_publisher(),
    )


CrewServiceDep = Annotated[CrewService, Depends(get_crew_service)]


def get_equipment_service(factory: InfrastructureFactoryDep) -> EquipmentService:
    return EquipmentService(
        factory.get_equipment_repository(),
        factory.get_user_repository(),
        factory.get_event_publisher(),
    )


EquipmentServiceDep = Annotated[EquipmentService, Depends(get_equipment_service)]


def get_attendance_service(factory: InfrastructureFactoryDep) -> AttendanceService:
    return AttendanceService(
        factory.get_attendance_repository(),
        factory.get_user_repository(),
        factory.get_event_publisher(),
    )


AttendanceServiceDep = Annotated[AttendanceService, Depends(get_attendance_service)]


def get_time_off_service(factory: InfrastructureFactoryDep) -> TimeOffService:
    return TimeOffService(
        factory.get_time_off_repository(),
        factory.get_user_repository(),
        factory.get_event_publisher(),
    )


TimeOffServiceDep = Annotated[TimeOffService, Depends(get_time_off_service)]


def get_trip_service(factory: InfrastructureFactoryDep) -> TripService:
    return TripService(
        factory.get_trip_repository(),
        factory.get_user_repository(),
        factory.get_event_publisher(),
    )


TripServiceDep = Annotated[TripService, Depends(get_trip_service)]
