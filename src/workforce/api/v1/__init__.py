"""
API v1 endpoints.

Route prefix constants for consistent API versioning, plus the shared
error-response documentation used by every entity router.
"""

from typing import Any

from workforce.models.errors import ProblemDetail

API_V1_PREFIX: str = "/api/v1"

# Module-specific prefixes
ROLES_PREFIX: str = f"{API_V1_PREFIX}/roles"
PERMISSIONS_PREFIX: str = f"{API_V1_PREFIX}/permissions"
USERS_PREFIX: str = f"{API_V1_PREFIX}/users"
CREWS_PREFIX: str = f"{API_V1_PREFIX}/crews"
EQUIPMENT_PREFIX: str = f"{API_V1_PREFIX}/equipment"
ATTENDANCE_PREFIX: str = f"{API_V1_PREFIX}/attendance"
TIME_OFF_PREFIX: str = f"{API_V1_PREFIX}/time-off"
TRIPS_PREFIX: str = f"{API_V1_PREFIX}/trips"


def problem_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting ProblemDetail bodies."""
    return {code: {"model": ProblemDetail} for code in status_codes}


__all__ = [
    "API_V1_PREFIX",
    "ATTENDANCE_PREFIX",
    "CREWS_PREFIX",
    "EQUIPMENT_PREFIX",
    "PERMISSIONS_PREFIX",
    "ROLES_PREFIX",
    "TIME_OFF_PREFIX",
    "TRIPS_PREFIX",
    "USERS_PREFIX",
    "problem_responses",
]
