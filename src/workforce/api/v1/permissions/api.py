"""
Permission endpoints.

A permission grants one role create/read/update/delete rights on one module.
"""

from fastapi import APIRouter, status

from workforce.api.v1 import problem_responses
from workforce.di import PermissionServiceDep
from workforce.models import (
    CreatePermissionRequest,
    DeletedCountResponse,
    PermissionResponse,
    UpdatePermissionRequest,
)

router = APIRouter()


@router.post(
    "",
    response_model=PermissionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404, 409),
)
async def create_permission(
    request: CreatePermissionRequest, service: PermissionServiceDep
) -> PermissionResponse:
    """
    Grant a role rights on a module.

    Args:
        request: Role, module name and the four flags
        service: Permission service

    Returns:
        The created permission with its role
    """
    return await service.create(request)


@router.get("", response_model=list[PermissionResponse])
async def list_permissions(service: PermissionServiceDep) -> list[PermissionResponse]:
    return await service.list_all()


@router.get(
    "/role/{role_id}",
    response_model=list[PermissionResponse],
    responses=problem_responses(400),
)
async def list_role_permissions(
    role_id: str, service: PermissionServiceDep
) -> list[PermissionResponse]:
    """List the permissions granted to a role."""
    return await service.list_for_role(role_id)


@router.get(
    "/role/{role_id}/module/{module_name}",
    response_model=PermissionResponse,
    responses=problem_responses(400, 404),
)
async def get_role_module_permission(
    role_id: str, module_name: str, service: PermissionServiceDep
) -> PermissionResponse:
    """Look up the permission a role holds on one module."""
    return await service.get_for_role_module(role_id, module_name)


@router.delete(
    "/role/{role_id}",
    response_model=DeletedCountResponse,
    responses=problem_responses(400),
)
async def delete_role_permissions(
    role_id: str, service: PermissionServiceDep
) -> DeletedCountResponse:
    """Revoke every permission granted to a role."""
    deleted = await service.delete_for_role(role_id)
    return DeletedCountResponse(deleted=deleted)


@router.get(
    "/{permission_id}",
    response_model=PermissionResponse,
    responses=problem_responses(400, 404),
)
async def get_permission(
    permission_id: str, service: PermissionServiceDep
) -> PermissionResponse:
    return await service.get(permission_id)


@router.put(
    "/{permission_id}",
    response_model=PermissionResponse,
    responses=problem_responses(400, 404, 409),
)
async def update_permission(
    permission_id: str,
    request: UpdatePermissionRequest,
    service: PermissionServiceDep,
) -> PermissionResponse:
    """
    Update a permission.

    Moving it to another role or module is rejected when that pair is taken.
    """
    return await service.update(permission_id, request)


@router.delete(
    "/{permission_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_permission(permission_id: str, service: PermissionServiceDep) -> None:
    await service.delete(permission_id)
