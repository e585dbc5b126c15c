"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from workforce.api.v1.attendance.router import router as attendance_router
from workforce.api.v1.crews.router import router as crews_router
from workforce.api.v1.equipment.router import router as equipment_router
from workforce.api.v1.health.router import router as health_router
from workforce.api.v1.permissions.router import router as permissions_router
from workforce.api.v1.roles.router import router as roles_router
from workforce.api.v1.time_off.router import router as time_off_router
from workforce.api.v1.trips.router import router as trips_router
from workforce.api.v1.users.router import router as users_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, public)
    app.include_router(health_router)

    # Access control
    app.include_router(roles_router)
    app.include_router(permissions_router)

    # People and groups
    app.include_router(users_router)
    app.include_router(crews_router)

    # Assets and activity
    app.include_router(equipment_router)
    app.include_router(attendance_router)
    app.include_router(time_off_router)
    app.include_router(trips_router)
