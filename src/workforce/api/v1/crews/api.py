"""
Crew endpoints.

Crews group users; membership is managed under ``/{crew_id}/members``.
"""

from fastapi import APIRouter, status

from workforce.api.v1 import problem_responses
from workforce.di import CrewServiceDep
from workforce.models import (
    AddCrewMemberRequest,
    CreateCrewRequest,
    CrewMemberResponse,
    CrewResponse,
    UpdateCrewRequest,
)

router = APIRouter()


@router.post(
    "",
    response_model=CrewResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404),
)
async def create_crew(request: CreateCrewRequest, service: CrewServiceDep) -> CrewResponse:
    return await service.create(request)


@router.get("", response_model=list[CrewResponse])
async def list_crews(service: CrewServiceDep) -> list[CrewResponse]:
    """List all crews with their members."""
    return await service.list_all()


@router.get(
    "/memberships/{user_id}",
    response_model=list[CrewMemberResponse],
    responses=problem_responses(400),
)
async def list_user_memberships(
    user_id: str, service: CrewServiceDep
) -> list[CrewMemberResponse]:
    """List the crews a user belongs to."""
    return await service.list_memberships(user_id)


@router.get(
    "/{crew_id}", response_model=CrewResponse, responses=problem_responses(400, 404)
)
async def get_crew(crew_id: str, service: CrewServiceDep) -> CrewResponse:
    return await service.get(crew_id)


@router.put(
    "/{crew_id}",
    response_model=CrewResponse,
    responses=problem_responses(400, 404),
)
async def update_crew(
    crew_id: str, request: UpdateCrewRequest, service: CrewServiceDep
) -> CrewResponse:
    return await service.update(crew_id, request)


@router.delete(
    "/{crew_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def delete_crew(crew_id: str, service: CrewServiceDep) -> None:
    """
    Delete a crew.

    Membership rows are left in place.
    """
    await service.delete(crew_id)


@router.post(
    "/{crew_id}/members",
    response_model=CrewMemberResponse,
    status_code=status.HTTP_201_CREATED,
    responses=problem_responses(400, 404),
)
async def add_crew_member(
    crew_id: str, request: AddCrewMemberRequest, service: CrewServiceDep
) -> CrewMemberResponse:
    """
    Add a user to a crew.

    Args:
        crew_id: Crew identifier
        request: User to add
        service: Crew service

    Returns:
        The membership with the member's user
    """
    return await service.add_member(crew_id, request)


@router.get(
    "/{crew_id}/members",
    response_model=list[CrewMemberResponse],
    responses=problem_responses(400, 404),
)
async def list_crew_members(
    crew_id: str, service: CrewServiceDep
) -> list[CrewMemberResponse]:
    return await service.list_members(crew_id)


@router.delete(
    "/{crew_id}/members/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=problem_responses(400, 404),
)
async def remove_crew_member(
    crew_id: str, user_id: str, service: CrewServiceDep
) -> None:
    await service.remove_member(crew_id, user_id)
