"""Unit tests for UserService."""

import uuid

import pytest

from workforce.domain.entities import UserProfile, UserStatus
from workforce.domain.exceptions import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
)
from workforce.models import CreateUserRequest, UpdateUserRequest


def new_user(**overrides) -> CreateUserRequest:
    fields = {
        "first_name": "Luis",
        "last_name": "Garcia",
        "employee_id": "E-200",
        "email": "luis.garcia@acme.io",
    }
    fields.update(overrides)
    return CreateUserRequest(**fields)


@pytest.mark.asyncio
async def test_create_user_defaults(user_service, publisher):
    user = await user_service.create(new_user())

    assert user.status == UserStatus.ACTIVE
    assert user.profile == UserProfile.FIELD_AGENT
    assert user.role_id is None
    assert user.role is None
    assert publisher.of_type("UserCreated")[0].payload == {
        "user_id": str(user.id),
        "employee_id": "E-200",
        "email": "luis.garcia@acme.io",
    }


@pytest.mark.asyncio
async def test_create_user_with_role(user_service, supervisor):
    user = await user_service.create(new_user(role_id=str(supervisor.id)))

    assert user.role_id == supervisor.id
    assert user.role.role_name == "Supervisor"
    assert (await user_service.get(user.id)).role.id == supervisor.id


@pytest.mark.asyncio
async def test_create_user_with_unknown_role(user_service):
    with pytest.raises(NotFoundError):
        await user_service.create(new_user(role_id=str(uuid.uuid4())))

    assert await user_service.list_all() == []


@pytest.mark.asyncio
async def test_create_user_with_unknown_creator(user_service):
    with pytest.raises(NotFoundError, match="creator"):
        await user_service.create(new_user(created_by=str(uuid.uuid4())))


@pytest.mark.asyncio
async def test_create_user_records_creator(user_service, worker):
    user = await user_service.create(new_user(created_by=str(worker.id)))

    assert user.created_by == worker.id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"employee_id": "E-100", "email": "someone.else@acme.io"},
        {"employee_id": "E-999", "email": "ana.lopez@acme.io"},
    ],
)
async def test_create_user_natural_key_conflicts(
    user_service, worker, publisher, overrides
):
    with pytest.raises(ConflictError):
        await user_service.create(new_user(**overrides))

    assert len(await user_service.list_all()) == 1
    assert len(publisher.of_type("UserCreated")) == 1


@pytest.mark.asyncio
async def test_lookup_by_email_and_employee_id(user_service, worker):
    by_email = await user_service.get_by_email("ana.lopez@acme.io")
    by_employee = await user_service.get_by_employee_id("E-100")

    assert by_email.id == by_employee.id == worker.id

    with pytest.raises(NotFoundError):
        await user_service.get_by_email("nobody@acme.io")
    with pytest.raises(NotFoundError):
        await user_service.get_by_employee_id("E-404")


@pytest.mark.asyncio
async def test_list_by_role(user_service, supervisor, worker):
    lead = await user_service.create(new_user(role_id=str(supervisor.id)))

    users = await user_service.list_by_role(str(supervisor.id))

    assert [user.id for user in users] == [lead.id]

    with pytest.raises(InvalidArgumentError):
        await user_service.list_by_role("supervisor")


@pytest.mark.asyncio
async def test_update_user_assign_and_unassign_role(user_service, supervisor, worker):
    assigned = await user_service.update(
        worker.id, UpdateUserRequest(role_id=str(supervisor.id))
    )
    assert assigned.role_id == supervisor.id
    assert assigned.role.role_name == "Supervisor"

    unassigned = await user_service.update(worker.id, UpdateUserRequest(role_id=None))
    assert unassigned.role_id is None
    assert unassigned.role is None


@pytest.mark.asyncio
async def test_update_user_keeps_role_when_omitted(user_service, supervisor):
    user = await user_service.create(new_user(role_id=str(supervisor.id)))

    updated = await user_service.update(user.id, UpdateUserRequest(phone="555-0100"))

    assert updated.phone == "555-0100"
    assert updated.role_id == supervisor.id


@pytest.mark.asyncio
async def test_update_user_own_email_is_not_a_conflict(user_service, worker):
    updated = await user_service.update(
        worker.id,
        UpdateUserRequest(email="ana.lopez@acme.io", employee_id="E-100"),
    )

    assert updated.email == worker.email
    assert updated.updated_at >= worker.updated_at


@pytest.mark.asyncio
async def test_update_user_to_taken_email(user_service, worker):
    other = await user_service.create(new_user())

    with pytest.raises(ConflictError):
        await user_service.update(
            other.id, UpdateUserRequest(email="ana.lopez@acme.io")
        )


@pytest.mark.asyncio
async def test_update_user_status(user_service, worker, publisher):
    updated = await user_service.update(
        worker.id, UpdateUserRequest(status=UserStatus.INACTIVE)
    )

    assert updated.status == UserStatus.INACTIVE
    assert len(publisher.of_type("UserUpdated")) == 1


@pytest.mark.asyncio
async def test_delete_user(user_service, worker, publisher):
    await user_service.delete(worker.id)

    with pytest.raises(NotFoundError):
        await user_service.get(worker.id)
    assert publisher.of_type("UserDeleted")[0].payload == {"user_id": str(worker.id)}
