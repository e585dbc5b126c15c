"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs. Domain errors keep their
message and stable code; persistence failures and unexpected exceptions are
reported without internal details.
"""

from http import HTTPStatus

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from workforce.core.logging import logger
from workforce.domain.exceptions import PersistenceError, WorkforceError
from workforce.models.errors import ProblemDetail, ValidationErrorDetail

PROBLEM_JSON = "application/problem+json"


def _problem_response(problem: ProblemDetail) -> JSONResponse:
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(mode="json", exclude_none=True),
        media_type=PROBLEM_JSON,
    )


def _title(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Error"


async def workforce_exception_handler(
    request: Request, exc: WorkforceError
) -> JSONResponse:  # noqa: ASYNC100
    """Handle domain errors (invalid argument, not found, conflict, persistence).

    Args:
        request: The FastAPI request object.
        exc: The domain error raised by a service.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    if isinstance(exc, PersistenceError):
        logger.opt(exception=exc).error(
            f"Persistence failure on {request.method} {request.url.path}"
        )
        detail = "The request could not be completed. Please try again later."
    else:
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        detail = exc.message

    return _problem_response(
        ProblemDetail(
            title=_title(exc.status_code),
            status=exc.status_code,
            detail=detail,
            instance=str(request.url.path),
            code=exc.code,
        )
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:  # noqa: ASYNC100
    """Handle HTTPException with RFC 7807 ProblemDetail response."""
    logger.warning(
        f"HTTPException: {exc.status_code} - {exc.detail} "
        f"({request.method} {request.url.path})"
    )

    return _problem_response(
        ProblemDetail(
            title=_title(exc.status_code),
            status=exc.status_code,
            detail=str(exc.detail),
            instance=str(request.url.path),
        )
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:  # noqa: ASYNC100
    """Handle unexpected exceptions with 500 Internal Server Error."""
    logger.opt(exception=exc).error(
        f"Unexpected error: {type(exc).__name__} ({request.method} {request.url.path})"
    )

    return _problem_response(
        ProblemDetail(
            title="Internal Server Error",
            status=500,
            detail="An unexpected error occurred. Please try again later.",
            instance=str(request.url.path),
        )
    )


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors with field-level details.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with ProblemDetail body including validation errors.
    """
    logger.warning(
        f"Validation error: {len(exc.errors())} errors "
        f"({request.method} {request.url.path})"
    )

    errors = [
        ValidationErrorDetail(
            type=error["type"],
            loc=tuple(str(loc) for loc in error["loc"]),
            msg=error["msg"],
            input=error.get("input"),
            ctx=(
                {k: str(v) for k, v in error["ctx"].items()}
                if error.get("ctx")
                else None
            ),
        )
        for error in exc.errors()
    ]

    return _problem_response(
        ProblemDetail(
            title="Validation Error",
            status=422,
            detail=f"One or more validation errors occurred ({len(errors)} errors).",
            instance=str(request.url.path),
            errors=errors,
        )
    )
