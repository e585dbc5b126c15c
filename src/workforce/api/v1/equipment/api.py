"""Equipment endpoints."""

from fastapi import APIRouter, status

from workforce.api.v1 import problem_responses
from workforce.di import EquipmentServiceDep
from workforce.models import (
    CreateEquipmentRequest,
    EquipmentResponse,
    UpdateEquipmentRequest,
)

router = APIRouter()


@router.post(
    "",
    response_model=EquipmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404, 409),
)
async def create_equipment(
    request: CreateEquipmentRequest, service: EquipmentServiceDep
) -> EquipmentResponse:
    """
    Register equipment.

    Args:
        request: Name, optional serial number and holder
        service: Equipment service

    Returns:
        The created equipment with its holder
    """
    return await service.create(request)


@router.get("", response_model=list[EquipmentResponse])
async def list_equipment(service: EquipmentServiceDep) -> list[EquipmentResponse]:
    return await service.list_all()


@router.get(
    "/serial/{serial_number}",
    response_model=EquipmentResponse,
    responses=problem_responses(404),
)
async def get_equipment_by_serial_number(
    serial_number: str, service: EquipmentServiceDep
) -> EquipmentResponse:
    return await service.get_by_serial_number(serial_number)


@router.get(
    "/user/{user_id}",
    response_model=list[EquipmentResponse],
    responses=problem_responses(400),
)
async def list_user_equipment(
    user_id: str, service: EquipmentServiceDep
) -> list[EquipmentResponse]:
    """List the equipment assigned to a user."""
    return await service.list_for_user(user_id)


@router.get(
    "/{equipment_id}",
    response_model=EquipmentResponse,
    responses=problem_responses(400, 404),
)
async def get_equipment(
    equipment_id: str, service: EquipmentServiceDep
) -> EquipmentResponse:
    return await service.get(equipment_id)


@router.put(
    "/{equipment_id}",
    response_model=EquipmentResponse,
    responses=problem_responses(400, 404, 409),
)
async def update_equipment(
    equipment_id: str,
    request: UpdateEquipmentRequest,
    service: EquipmentServiceDep,
) -> EquipmentResponse:
    """
    Update equipment.

    ``null`` for ``serial_number`` or ``assigned_to_user`` clears the field.
    """
    return await service.update(equipment_id, request)


@router.delete(
    "/{equipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_equipment(equipment_id: str, service: EquipmentServiceDep) -> None:
    await service.delete(equipment_id)
