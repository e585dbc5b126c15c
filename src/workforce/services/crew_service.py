"""Crew service: crews and their memberships."""

import uuid

from loguru import logger

from workforce.domain.entities import Crew, CrewMember, User
from workforce.domain.exceptions import NotFoundError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import (
    CrewMemberRepository,
    CrewRepository,
    UserRepository,
)
from workforce.models.crew import (
    AddCrewMemberRequest,
    CreateCrewRequest,
    CrewMemberResponse,
    CrewResponse,
    UpdateCrewRequest,
)
from workforce.services.base import BaseService


class CrewService(BaseService):
    """
    Manage crews and crew membership.

    A user may be added to the same crew more than once; membership
    uniqueness is not enforced. Deleting a crew leaves its membership rows in
    place.
    """

    entity_name = "crew"

    def __init__(
        self,
        crews: CrewRepository,
        members: CrewMemberRepository,
        users: UserRepository,
        publisher: EventPublisher | None = None,
    ):
        super().__init__(publisher)
        self.crews = crews
        self.members = members
        self.users = users

    async def _load(self, crew_id: str | uuid.UUID) -> Crew:
        return await self._load_reference(self.crews, crew_id, "crew")

    async def _load_user(self, user_id: str | uuid.UUID, what: str = "user") -> User:
        return await self._load_reference(self.users, user_id, what)

    async def create(self, request: CreateCrewRequest) -> CrewResponse:
        creator = (
            await self._load_user(request.created_by, "creator")
            if request.created_by
            else None
        )

        now = self._now()
        crew = Crew(
            id=uuid.uuid4(),
            crew_name=request.crew_name,
            created_by=creator.id if creator else None,
            created_at=now,
            updated_at=now,
        )
        with self._store("create crew"):
            await self.crews.create(crew)

        logger.info(f"Created crew {crew.id} ({crew.crew_name})")
        await self._publish(
            "CrewCreated", {"crew_id": str(crew.id), "crew_name": crew.crew_name}
        )
        return CrewResponse.model_validate(crew)

    async def get(self, crew_id: str | uuid.UUID) -> CrewResponse:
        return CrewResponse.model_validate(await self._load(crew_id))

    async def list_all(self) -> list[CrewResponse]:
        with self._store("list crews"):
            crews = await self.crews.find_all()
        return [CrewResponse.model_validate(crew) for crew in crews]

    async def update(
        self, crew_id: str | uuid.UUID, request: UpdateCrewRequest
    ) -> CrewResponse:
        crew = await self._load(crew_id)

        for name, value in self._changes(request).items():
            setattr(crew, name, value)
        crew.updated_at = self._now()

        with self._store("update crew"):
            await self.crews.update(crew)

        logger.info(f"Updated crew {crew.id}")
        await self._publish(
            "CrewUpdated", {"crew_id": str(crew.id), "crew_name": crew.crew_name}
        )
        return CrewResponse.model_validate(crew)

    async def delete(self, crew_id: str | uuid.UUID) -> None:
        crew = await self._load(crew_id)

        with self._store("delete crew"):
            await self.crews.delete(crew.id)

        logger.info(f"Deleted crew {crew.id}")
        await self._publish("CrewDeleted", {"crew_id": str(crew.id)})

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    async def add_member(
        self, crew_id: str | uuid.UUID, request: AddCrewMemberRequest
    ) -> CrewMemberResponse:
        """
        Add a user to a crew.

        Raises:
            NotFoundError: Crew or user does not exist
        """
        crew = await self._load(crew_id)
        user = await self._load_user(request.user_id)

        member = CrewMember(
            id=uuid.uuid4(),
            crew_id=crew.id,
            user_id=user.id,
            assigned_at=self._now(),
        )
        with self._store("add crew member"):
            await self.members.create(member)

        logger.info(f"Added user {user.id} to crew {crew.id}")
        await self._publish(
            "CrewMemberAdded", {"crew_id": str(crew.id), "user_id": str(user.id)}
        )
        member.user = user
        return CrewMemberResponse.model_validate(member)

    async def remove_member(
        self, crew_id: str | uuid.UUID, user_id: str | uuid.UUID
    ) -> int:
        """
        Remove a user from a crew.

        Returns:
            Number of membership rows removed

        Raises:
            NotFoundError: The user is not a member of the crew
        """
        parsed_crew = self._parse_id(crew_id, "crew id")
        parsed_user = self._parse_id(user_id, "user id")

        with self._store("remove crew member"):
            removed = await self.members.delete_by_crew_and_user(
                parsed_crew, parsed_user
            )
        if not removed:
            raise NotFoundError("crew member not found")

        logger.info(f"Removed user {parsed_user} from crew {parsed_crew}")
        await self._publish(
            "CrewMemberRemoved",
            {"crew_id": str(parsed_crew), "user_id": str(parsed_user)},
        )
        return removed

    async def list_members(self, crew_id: str | uuid.UUID) -> list[CrewMemberResponse]:
        crew = await self._load(crew_id)
        with self._store("list crew members"):
            members = await self.members.find_by_crew_id(crew.id)
        return [CrewMemberResponse.model_validate(member) for member in members]

    async def list_memberships(
        self, user_id: str | uuid.UUID
    ) -> list[CrewMemberResponse]:
        """Memberships of one user across all crews (without the user embedded)."""
        parsed = self._parse_id(user_id, "user id")
        with self._store("list crew members"):
            members = await self.members.find_by_user_id(parsed)
        return [CrewMemberResponse.model_validate(member) for member in members]
