"""
Unit tests for exception handlers.

Tests RFC 7807 response formatting and status code mapping.
"""

import json

import pytest
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError

from workforce.domain.exceptions import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    PersistenceError,
)
from workforce.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    workforce_exception_handler,
)


def make_request(path: str = "/api/v1/roles", method: str = "POST") -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "root_path": "",
            "scheme": "http",
            "query_string": b"",
            "headers": [],
            "server": ("testserver", 80),
        }
    )


def body(response) -> dict:
    return json.loads(response.body)


# ===========================
# Domain error handler
# ===========================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("exc", "status", "code", "title"),
    [
        (InvalidArgumentError("bad id"), 400, "invalid_argument", "Bad Request"),
        (NotFoundError("role not found"), 404, "not_found", "Not Found"),
        (ConflictError("role exists"), 409, "conflict", "Conflict"),
    ],
)
async def test_workforce_errors_keep_message(exc, status, code, title):
    # Act
    response = await workforce_exception_handler(make_request(), exc)

    # Assert
    assert response.status_code == status
    assert response.media_type == "application/problem+json"
    problem = body(response)
    assert problem["status"] == status
    assert problem["code"] == code
    assert problem["title"] == title
    assert problem["detail"] == exc.message
    assert problem["instance"] == "/api/v1/roles"
    assert problem["type"].startswith("https://datatracker.ietf.org/")


@pytest.mark.asyncio
async def test_persistence_error_is_opaque():
    """Store details never reach the client."""
    exc = PersistenceError("failed to create role")
    exc.__cause__ = RuntimeError("password authentication failed for user admin")

    response = await workforce_exception_handler(make_request(), exc)

    problem = body(response)
    assert response.status_code == 500
    assert problem["code"] == "persistence"
    assert "password" not in problem["detail"]
    assert "failed to create role" not in problem["detail"]


# ===========================
# Framework error handlers
# ===========================


@pytest.mark.asyncio
async def test_http_exception_handler_404():
    exc = HTTPException(status_code=404, detail="Not Found")

    response = await http_exception_handler(make_request("/nowhere", "GET"), exc)

    problem = body(response)
    assert response.status_code == 404
    assert problem["detail"] == "Not Found"
    assert "code" not in problem


@pytest.mark.asyncio
async def test_general_exception_handler():
    response = await general_exception_handler(
        make_request(), RuntimeError("boom with secrets")
    )

    problem = body(response)
    assert response.status_code == 500
    assert problem["title"] == "Internal Server Error"
    assert "boom" not in problem["detail"]


@pytest.mark.asyncio
async def test_validation_exception_handler():
    exc = RequestValidationError(
        [
            {
                "type": "string_too_short",
                "loc": ("body", "role_name"),
                "msg": "String should have at least 1 character",
                "input": "",
                "ctx": {"min_length": 1},
            }
        ]
    )

    response = await validation_exception_handler(make_request(), exc)

    problem = body(response)
    assert response.status_code == 422
    assert problem["errors"][0]["loc"] == ["body", "role_name"]
    assert problem["errors"][0]["ctx"] == {"min_length": "1"}
    assert "1 errors" in problem["detail"]
