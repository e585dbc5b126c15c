"""
Role endpoints.

Roles are named groups that permissions attach to and users belong to.
"""

from fastapi import APIRouter, status

from workforce.api.v1 import problem_responses
from workforce.di import RoleServiceDep
from workforce.models import CreateRoleRequest, RoleResponse, UpdateRoleRequest

router = APIRouter()


@router.post(
    "",
    response_model=RoleResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(409, 500),
)
async def create_role(request: CreateRoleRequest, service: RoleServiceDep) -> RoleResponse:
    """
    Create a role.

    Args:
        request: Role name and description
        service: Role service

    Returns:
        The created role
    """
    return await service.create(request)


@router.get("", response_model=list[RoleResponse])
async def list_roles(service: RoleServiceDep) -> list[RoleResponse]:
    """List all roles in creation order."""
    return await service.list_all()


@router.get(
    "/{role_id}", response_model=RoleResponse, responses=problem_responses(400, 404)
)
async def get_role(role_id: str, service: RoleServiceDep) -> RoleResponse:
    return await service.get(role_id)


@router.put(
    "/{role_id}",
    response_model=RoleResponse,
    responses=problem_responses(400, 404, 409),
)
async def update_role(
    role_id: str, request: UpdateRoleRequest, service: RoleServiceDep
) -> RoleResponse:
    """
    Update a role.

    Only the fields present in the body are changed.
    """
    return await service.update(role_id, request)


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_role(role_id: str, service: RoleServiceDep) -> None:
    await service.delete(role_id)
