"""HTTP tests for role and permission endpoints."""

import uuid

from fastapi import status

ROLES = "/api/v1/roles"
PERMISSIONS = "/api/v1/permissions"


def test_role_lifecycle(client, events):
    # Create
    response = client.post(
        ROLES, json={"role_name": "Dispatcher", "description": "Dispatch ops"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    role = response.json()
    assert role["created_at"] == role["updated_at"]

    # Read
    assert client.get(f"{ROLES}/{role['id']}").json()["role_name"] == "Dispatcher"
    assert [r["id"] for r in client.get(ROLES).json()] == [role["id"]]

    # Update
    response = client.put(f"{ROLES}/{role['id']}", json={"description": "Dispatch"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["role_name"] == "Dispatcher"
    assert response.json()["description"] == "Dispatch"

    # Delete twice
    assert client.delete(f"{ROLES}/{role['id']}").status_code == 204
    response = client.delete(f"{ROLES}/{role['id']}")
    assert response.status_code == status.HTTP_404_NOT_FOUND

    assert [e.type for e in events.events] == [
        "RoleCreated",
        "RoleUpdated",
        "RoleDeleted",
    ]


def test_duplicate_role_is_409_problem(client, events):
    client.post(ROLES, json={"role_name": "Dispatcher"})

    response = client.post(ROLES, json={"role_name": "Dispatcher"})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.headers["content-type"] == "application/problem+json"
    problem = response.json()
    assert problem["code"] == "conflict"
    assert problem["instance"] == ROLES
    assert len(client.get(ROLES).json()) == 1
    assert len(events.of_type("RoleCreated")) == 1


def test_malformed_and_unknown_ids(client):
    malformed = client.get(f"{ROLES}/not-a-uuid")
    unknown = client.put(
        f"{ROLES}/{uuid.uuid4()}", json={"role_name": "Dispatcher2"}
    )

    assert malformed.status_code == status.HTTP_400_BAD_REQUEST
    assert malformed.json()["code"] == "invalid_argument"
    assert unknown.status_code == status.HTTP_404_NOT_FOUND
    assert unknown.json()["code"] == "not_found"


def test_body_validation_is_422(client):
    response = client.post(ROLES, json={"role_name": ""})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    problem = response.json()
    assert problem["errors"][0]["loc"] == ["body", "role_name"]


def test_permission_endpoints(client, events):
    role_id = client.post(ROLES, json={"role_name": "Supervisor"}).json()["id"]

    created = client.post(
        PERMISSIONS,
        json={"role_id": role_id, "module_name": "crews", "can_read": True},
    )
    assert created.status_code == 201
    assert created.json()["role"]["role_name"] == "Supervisor"

    duplicate = client.post(
        PERMISSIONS, json={"role_id": role_id, "module_name": "crews"}
    )
    assert duplicate.status_code == 409

    client.post(PERMISSIONS, json={"role_id": role_id, "module_name": "trips"})
    listed = client.get(f"{PERMISSIONS}/role/{role_id}").json()
    assert sorted(p["module_name"] for p in listed) == ["crews", "trips"]

    lookup = client.get(f"{PERMISSIONS}/role/{role_id}/module/crews")
    assert lookup.json()["id"] == created.json()["id"]

    revoked = client.put(
        f"{PERMISSIONS}/{created.json()['id']}", json={"can_read": False}
    )
    assert revoked.json()["can_read"] is False

    bulk = client.delete(f"{PERMISSIONS}/role/{role_id}")
    assert bulk.json() == {"deleted": 2}
    assert client.get(PERMISSIONS).json() == []
    assert len(events.of_type("PermissionDeleted")) == 2


def test_problem_response_carries_trace_id(client):
    response = client.get(f"{ROLES}/{uuid.uuid4()}", headers={"X-Trace-ID": "t-42"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.headers["X-Trace-ID"] == "t-42"
