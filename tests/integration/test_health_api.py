"""Tests for health check endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from workforce import __version__
from workforce.application import create_app
from workforce.infrastructure import InfrastructureFactory
from workforce.middleware import TRACE_ID_HEADER


@pytest.fixture
def client():
    """Create test client."""
    app = create_app(InfrastructureFactory(provider="memory"))
    with TestClient(app) as test_client:
        yield test_client


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert data["infrastructure_provider"] == "memory"


def test_root(client):
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["version"] == __version__


def test_trace_id_is_generated(client):
    response = client.get("/health")

    assert response.headers[TRACE_ID_HEADER]


def test_trace_id_is_propagated(client):
    response = client.get("/health", headers={TRACE_ID_HEADER: "abc-123"})

    assert response.headers[TRACE_ID_HEADER] == "abc-123"


def test_factory_is_built_from_settings_when_not_injected():
    app = create_app()

    with TestClient(app) as test_client:
        response = test_client.get("/health")

    assert response.json()["infrastructure_provider"] == "memory"


def test_openapi_documents_problem_details(client):
    schema = client.get("/openapi.json").json()

    assert "ProblemDetail" in schema["components"]["schemas"]
    assert {tag["name"] for tag in schema["tags"]} >= {"Roles", "Time Off"}
    create_role = schema["paths"]["/api/v1/roles"]["post"]
    assert "409" in create_role["responses"]
    assert "422" in create_role["responses"]
