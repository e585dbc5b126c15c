"""
Unit tests for RoleService.

Covers name uniqueness, partial updates and event publication.
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from workforce.domain.exceptions import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    PersistenceError,
    PublishError,
    StoreError,
)
from workforce.models import CreateRoleRequest, UpdateRoleRequest
from workforce.services import RoleService

# ===========================
# Create
# ===========================


@pytest.mark.asyncio
async def test_create_role(role_service, publisher):
    """Creating a role returns a fresh id and equal timestamps."""
    # Act
    role = await role_service.create(
        CreateRoleRequest(role_name="Dispatcher", description="Dispatch ops")
    )

    # Assert
    assert isinstance(role.id, uuid.UUID)
    assert role.role_name == "Dispatcher"
    assert role.description == "Dispatch ops"
    assert role.created_at == role.updated_at

    assert [event.type for event in publisher.events] == ["RoleCreated"]
    assert publisher.events[0].payload == {
        "role_id": str(role.id),
        "role_name": "Dispatcher",
    }


@pytest.mark.asyncio
async def test_create_duplicate_role_conflicts(role_service, publisher):
    """A second role with the same name is rejected without side effects."""
    request = CreateRoleRequest(role_name="Dispatcher", description="Dispatch ops")
    await role_service.create(request)

    with pytest.raises(ConflictError):
        await role_service.create(request)

    assert len(await role_service.list_all()) == 1
    assert len(publisher.of_type("RoleCreated")) == 1


@pytest.mark.asyncio
async def test_create_role_store_failure_publishes_nothing(publisher):
    """A failing store surfaces as PersistenceError and no event is sent."""
    roles = AsyncMock()
    roles.find_by_name.return_value = None
    roles.create.side_effect = StoreError("connection reset")
    service = RoleService(roles, publisher)

    with pytest.raises(PersistenceError) as exc_info:
        await service.create(CreateRoleRequest(role_name="Dispatcher"))

    assert "connection reset" not in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, StoreError)
    assert publisher.events == []


@pytest.mark.asyncio
async def test_create_role_store_constraint_maps_to_conflict(publisher):
    """A unique-constraint race in the store still reports a conflict."""
    from workforce.domain.exceptions import ConstraintViolationError

    roles = AsyncMock()
    roles.find_by_name.return_value = None
    roles.create.side_effect = ConstraintViolationError("roles_role_name_key")
    service = RoleService(roles, publisher)

    with pytest.raises(ConflictError):
        await service.create(CreateRoleRequest(role_name="Dispatcher"))

    assert publisher.events == []


# ===========================
# Read
# ===========================


@pytest.mark.asyncio
async def test_get_role(role_service, supervisor):
    role = await role_service.get(str(supervisor.id))

    assert role == supervisor


@pytest.mark.asyncio
async def test_get_role_malformed_id(role_service):
    with pytest.raises(InvalidArgumentError):
        await role_service.get("not-a-uuid")


@pytest.mark.asyncio
async def test_get_role_missing(role_service):
    with pytest.raises(NotFoundError):
        await role_service.get(uuid.uuid4())


@pytest.mark.asyncio
async def test_list_roles_in_creation_order(role_service):
    for name in ("Admin", "Dispatcher", "Driver"):
        await role_service.create(CreateRoleRequest(role_name=name))

    roles = await role_service.list_all()

    assert [role.role_name for role in roles] == ["Admin", "Dispatcher", "Driver"]


# ===========================
# Update
# ===========================


@pytest.mark.asyncio
async def test_update_missing_role(role_service, publisher):
    """Updating an unknown role fails and publishes nothing."""
    with pytest.raises(NotFoundError):
        await role_service.update(
            str(uuid.uuid4()), UpdateRoleRequest(role_name="Dispatcher2")
        )

    assert publisher.events == []


@pytest.mark.asyncio
async def test_update_role_to_same_name(role_service, supervisor, publisher):
    """Renaming a role to its current name only refreshes updated_at."""
    updated = await role_service.update(
        supervisor.id, UpdateRoleRequest(role_name="Supervisor")
    )

    assert updated.role_name == supervisor.role_name
    assert updated.description == supervisor.description
    assert updated.created_at == supervisor.created_at
    assert updated.updated_at >= supervisor.updated_at
    assert len(publisher.of_type("RoleUpdated")) == 1


@pytest.mark.asyncio
async def test_update_role_to_taken_name(role_service, supervisor):
    other = await role_service.create(CreateRoleRequest(role_name="Driver"))

    with pytest.raises(ConflictError):
        await role_service.update(other.id, UpdateRoleRequest(role_name="Supervisor"))

    assert (await role_service.get(other.id)).role_name == "Driver"


@pytest.mark.asyncio
async def test_update_role_only_supplied_fields(role_service, supervisor):
    """Omitted fields and explicit nulls leave the stored values alone."""
    updated = await role_service.update(
        supervisor.id, UpdateRoleRequest(description="Leads a crew", role_name=None)
    )

    assert updated.role_name == "Supervisor"
    assert updated.description == "Leads a crew"


@pytest.mark.asyncio
async def test_update_role_can_clear_description(role_service, supervisor):
    updated = await role_service.update(
        supervisor.id, UpdateRoleRequest(description="")
    )

    assert updated.description == ""


# ===========================
# Delete
# ===========================


@pytest.mark.asyncio
async def test_delete_role_twice(role_service, supervisor, publisher):
    """The second delete of the same role reports NotFound."""
    await role_service.delete(supervisor.id)

    with pytest.raises(NotFoundError):
        await role_service.delete(supervisor.id)

    deleted = publisher.of_type("RoleDeleted")
    assert len(deleted) == 1
    assert deleted[0].payload == {
        "role_id": str(supervisor.id),
        "role_name": "Supervisor",
    }


# ===========================
# Event publication
# ===========================


@pytest.mark.asyncio
async def test_role_service_without_publisher(factory):
    """A service built without a publisher still performs every operation."""
    service = RoleService(factory.get_role_repository())

    role = await service.create(CreateRoleRequest(role_name="Dispatcher"))
    await service.update(role.id, UpdateRoleRequest(description="Ops"))
    await service.delete(role.id)

    assert await service.list_all() == []


@pytest.mark.asyncio
async def test_publish_failure_does_not_fail_operation(factory):
    """A publisher error is swallowed once the change is stored."""
    failing = AsyncMock()
    failing.publish.side_effect = PublishError("broker unavailable")
    service = RoleService(factory.get_role_repository(), failing)

    role = await service.create(CreateRoleRequest(role_name="Dispatcher"))

    assert (await service.get(role.id)).role_name == "Dispatcher"
    failing.publish.assert_awaited_once()
