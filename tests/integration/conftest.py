"""Fixtures for HTTP-level tests."""

import pytest
from fastapi.testclient import TestClient

from workforce.application import create_app
from workforce.infrastructure import InfrastructureFactory


@pytest.fixture
def infrastructure() -> InfrastructureFactory:
    return InfrastructureFactory(provider="memory", event_provider="memory")


@pytest.fixture
def events(infrastructure):
    """Memory publisher the application publishes to."""
    return infrastructure.get_event_publisher()


@pytest.fixture
def client(infrastructure, events):
    app = create_app(infrastructure_factory=infrastructure)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_id(client) -> str:
    response = client.post(
        "/api/v1/users",
        json={
            "first_name": "Ana",
            "last_name": "Lopez",
            "employee_id": "E-100",
            "email": "ana.lopez@acme.io",
        },
    )
    assert response.status_code == 201
    return response.json()["id"]
