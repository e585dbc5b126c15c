"""OpenAPI schema customization for the Workforce Backend API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

DESCRIPTION = """
# Workforce Backend API

Back-office API for field-workforce management.

## Resources

- **Roles and permissions**: named roles with per-module create/read/update/delete rights
- **Users**: employees with a status, a functional profile and an optional role
- **Crews**: groups of users with membership management
- **Equipment**: assets with an optional serial number and holder
- **Attendance**: check-in and check-out records
- **Time off**: leave requests with an inclusive period and review status
- **Trips**: journeys with origin, destination and distance

Every create, update and delete emits a domain event when an event publisher
is configured.

## Error Handling

All errors follow [RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807) format:

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.8",
  "title": "Conflict",
  "status": 409,
  "detail": "role name 'Supervisor' already exists",
  "instance": "/api/v1/roles",
  "code": "conflict"
}
```

| Status | Code | Meaning |
|--------|------|---------|
| 400 | `invalid_argument` | Malformed identifier or value |
| 404 | `not_found` | Referenced entity does not exist |
| 409 | `conflict` | Natural key already taken |
| 422 | | Request body failed validation |
| 500 | `persistence` | Storage failure |
"""

TAGS = [
    {"name": "Health", "description": "Health check endpoints for monitoring"},
    {"name": "Roles", "description": "Role management"},
    {"name": "Permissions", "description": "Per-module rights granted to roles"},
    {"name": "Users", "description": "Workforce users"},
    {"name": "Crews", "description": "Crews and crew membership"},
    {"name": "Equipment", "description": "Equipment inventory and assignment"},
    {"name": "Attendance", "description": "Check-in and check-out records"},
    {"name": "Time Off", "description": "Leave requests"},
    {"name": "Trips", "description": "Business trips"},
]


def _problem_response(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "content": {
            "application/problem+json": {
                "schema": {"$ref": "#/components/schemas/ProblemDetail"}
            }
        },
    }


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=DESCRIPTION,
        routes=app.routes,
    )
    openapi_schema["tags"] = TAGS

    # Add RFC 7807 error responses to all endpoints
    for path in openapi_schema["paths"].values():
        for operation in path.values():
            if isinstance(operation, dict) and "responses" in operation:
                operation["responses"]["422"] = _problem_response("Validation Error")
                operation["responses"]["500"] = _problem_response(
                    "Internal Server Error"
                )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
