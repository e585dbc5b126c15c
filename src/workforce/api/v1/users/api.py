"""
User endpoints.

Users are looked up by identifier, e-mail, employee number or role.
"""

from fastapi import APIRouter, status

from workforce.api.v1 import problem_responses
from workforce.di import UserServiceDep
from workforce.models import CreateUserRequest, UpdateUserRequest, UserResponse

router = APIRouter()


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404, 409),
)
async def create_user(request: CreateUserRequest, service: UserServiceDep) -> UserResponse:
    """
    Register a user.

    Args:
        request: Personal data, optional role and creator
        service: User service

    Returns:
        The created user with its role
    """
    return await service.create(request)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    return await service.list_all()


@router.get(
    "/email/{email}", response_model=UserResponse, responses=problem_responses(404)
)
async def get_user_by_email(email: str, service: UserServiceDep) -> UserResponse:
    return await service.get_by_email(email)


@router.get(
    "/employee/{employee_id}",
    response_model=UserResponse,
    responses=problem_responses(404),
)
async def get_user_by_employee_id(
    employee_id: str, service: UserServiceDep
) -> UserResponse:
    return await service.get_by_employee_id(employee_id)


@router.get(
    "/role/{role_id}",
    response_model=list[UserResponse],
    responses=problem_responses(400),
)
async def list_role_users(role_id: str, service: UserServiceDep) -> list[UserResponse]:
    """List the users holding a role."""
    return await service.list_by_role(role_id)


@router.get(
    "/{user_id}", response_model=UserResponse, responses=problem_responses(400, 404)
)
async def get_user(user_id: str, service: UserServiceDep) -> UserResponse:
    return await service.get(user_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses=problem_responses(400, 404, 409),
)
async def update_user(
    user_id: str, request: UpdateUserRequest, service: UserServiceDep
) -> UserResponse:
    """
    Update a user.

    Send ``"role_id": null`` to unassign the role.
    """
    return await service.update(user_id, request)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_user(user_id: str, service: UserServiceDep) -> None:
    await service.delete(user_id)
