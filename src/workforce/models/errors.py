"""Error response models following RFC 7807 Problem Details."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

RFC7231 = "https://datatracker.ietf.org/doc/html/rfc7231#section-"

# HTTP status -> RFC 7231 section (or full URL when defined elsewhere)
status_to_section: dict[int, str] = {
    400: "6.5.1",
    404: "6.5.4",
    405: "6.5.5",
    409: "6.5.8",
    422: "https://datatracker.ietf.org/doc/html/rfc4918#section-11.2",
    500: "6.6.1",
    503: "6.6.4",
}


def get_rfc_section_url(status: int) -> str:
    """Documentation URL for ``status``; unknown codes map to 500."""
    section = status_to_section.get(status, "6.6.1")
    if section.startswith("https://"):
        return section
    return f"{RFC7231}{section}"


class ValidationErrorDetail(BaseModel):
    """One field-level validation failure (mirrors pydantic's error dicts)."""

    type: str = Field(..., description="Error type")
    loc: tuple[str, ...] = Field(..., description="Error location in request")
    msg: str = Field(..., description="Human-readable error message")
    input: Any = Field(None, description="Invalid input value")
    ctx: dict[str, Any] | None = Field(None, description="Additional error context")


class ProblemDetail(BaseModel):
    """Problem Detail response as defined in RFC 7807.

    Attributes:
        type: URI reference to the problem type (derived from status).
        title: Short, human-readable summary of the problem type.
        status: HTTP status code.
        detail: Explanation specific to this occurrence.
        instance: Request path that produced the problem.
        code: Machine-readable workforce error code (extension member).
        errors: Field-level validation errors (422 responses only).

    Example:
        ```python
        problem = ProblemDetail(
            title="Conflict",
            status=409,
            detail="role with name 'Admin' already exists",
            instance="/api/v1/roles",
            code="conflict",
        )
        ```
    """

    type: str | None = Field(
        default=None,
        description="URI reference to the problem type (RFC 7807)",
        json_schema_extra={"example": f"{RFC7231}6.5.4"},
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        json_schema_extra={"example": "Not Found"},
    )
    status: int = Field(..., description="HTTP status code")
    detail: str | None = Field(
        default=None,
        description="Human-readable explanation",
        json_schema_extra={"example": "user not found"},
    )
    instance: str | None = Field(
        default=None,
        description="URI reference identifying this occurrence",
        json_schema_extra={"example": "/api/v1/users/0b6f..."},
    )
    code: str | None = Field(
        default=None,
        description="Workforce error code",
        json_schema_extra={"example": "not_found"},
    )
    errors: list[ValidationErrorDetail] | None = Field(
        default=None, description="Validation errors (for 422 responses)"
    )

    @model_validator(mode="before")
    @classmethod
    def set_default_type(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Derive ``type`` from ``status`` when not provided."""
        if values.get("type") is None:
            values["type"] = get_rfc_section_url(values.get("status", 500))
        return values
