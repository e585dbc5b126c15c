"""Unit tests for EquipmentService."""

import uuid

import pytest

from workforce.domain.entities import EquipmentStatus
from workforce.domain.exceptions import ConflictError, NotFoundError
from workforce.models import CreateEquipmentRequest, UpdateEquipmentRequest


@pytest.fixture
async def radio(equipment_service, worker):
    return await equipment_service.create(
        CreateEquipmentRequest(
            name="Radio", serial_number="RAD-001", assigned_to_user=str(worker.id)
        )
    )


@pytest.mark.asyncio
async def test_create_equipment(radio, worker, publisher):
    assert radio.serial_number == "RAD-001"
    assert radio.status == EquipmentStatus.ACTIVE
    assert radio.assigned_to_user == worker.id
    assert radio.user.id == worker.id
    assert publisher.of_type("EquipmentCreated")[0].payload == {
        "equipment_id": str(radio.id),
        "name": "Radio",
        "serial_number": "RAD-001",
    }


@pytest.mark.asyncio
async def test_duplicate_serial_number(equipment_service, radio, publisher):
    with pytest.raises(ConflictError):
        await equipment_service.create(
            CreateEquipmentRequest(name="Spare radio", serial_number="RAD-001")
        )

    assert len(publisher.of_type("EquipmentCreated")) == 1


@pytest.mark.asyncio
async def test_equipment_without_serial_never_conflicts(equipment_service):
    first = await equipment_service.create(CreateEquipmentRequest(name="Cone"))
    second = await equipment_service.create(CreateEquipmentRequest(name="Cone"))

    assert first.serial_number is None
    assert second.serial_number is None
    assert len(await equipment_service.list_all()) == 2


@pytest.mark.asyncio
async def test_create_equipment_unknown_holder(equipment_service):
    with pytest.raises(NotFoundError):
        await equipment_service.create(
            CreateEquipmentRequest(name="Radio", assigned_to_user=str(uuid.uuid4()))
        )


@pytest.mark.asyncio
async def test_lookup_by_serial_and_user(equipment_service, radio, worker):
    by_serial = await equipment_service.get_by_serial_number("RAD-001")
    held = await equipment_service.list_for_user(worker.id)

    assert by_serial.id == radio.id
    assert [item.id for item in held] == [radio.id]

    with pytest.raises(NotFoundError):
        await equipment_service.get_by_serial_number("RAD-404")


@pytest.mark.asyncio
async def test_update_equipment_unassign_and_clear_serial(equipment_service, radio):
    updated = await equipment_service.update(
        radio.id,
        UpdateEquipmentRequest(
            assigned_to_user=None,
            serial_number=None,
            status=EquipmentStatus.UNDER_MAINTENANCE,
        ),
    )

    assert updated.assigned_to_user is None
    assert updated.user is None
    assert updated.serial_number is None
    assert updated.status == EquipmentStatus.UNDER_MAINTENANCE
    assert updated.name == "Radio"


@pytest.mark.asyncio
async def test_update_equipment_to_taken_serial(equipment_service, radio):
    other = await equipment_service.create(
        CreateEquipmentRequest(name="Tablet", serial_number="TAB-001")
    )

    with pytest.raises(ConflictError):
        await equipment_service.update(
            other.id, UpdateEquipmentRequest(serial_number="RAD-001")
        )

    same = await equipment_service.update(
        radio.id, UpdateEquipmentRequest(serial_number="RAD-001")
    )
    assert same.serial_number == "RAD-001"


@pytest.mark.asyncio
async def test_delete_equipment(equipment_service, radio, publisher):
    await equipment_service.delete(radio.id)

    with pytest.raises(NotFoundError):
        await equipment_service.get(radio.id)
    with pytest.raises(NotFoundError):
        await equipment_service.delete(radio.id)
    assert len(publisher.of_type("EquipmentDeleted")) == 1
