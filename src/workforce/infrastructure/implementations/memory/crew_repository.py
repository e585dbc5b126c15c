"""In-memory crew and crew membership repositories."""

import copy
import dataclasses
import uuid

from workforce.domain.entities import Crew, CrewMember
from workforce.infrastructure.implementations.memory.store import MemoryTable
from workforce.infrastructure.repositories.crew_repository import (
    CrewMemberRepository,
    CrewRepository,
)


class MemoryCrewRepository(MemoryTable, CrewRepository):
    """Crew storage; finders attach members (with users) from the shared store."""

    table_name = "crews"

    def _detach(self, entity: Crew) -> Crew:
        return dataclasses.replace(copy.deepcopy(entity), members=[])

    def _with_members(self, crew: Crew | None) -> Crew | None:
        if crew is None:
            return None
        crew.members = [
            dataclasses.replace(
                copy.deepcopy(member), user=self._load_user(member.user_id)
            )
            for member in self.store.crew_members.values()
            if member.crew_id == crew.id
        ]
        return crew

    async def create(self, crew: Crew) -> None:
        self._insert(crew)

    async def find_by_id(self, crew_id: uuid.UUID) -> Crew | None:
        return self._with_members(self._first(lambda row: row.id == crew_id))

    async def find_all(self) -> list[Crew]:
        return [self._with_members(row) for row in self._select()]

    async def update(self, crew: Crew) -> None:
        self._replace(crew)

    async def delete(self, crew_id: uuid.UUID) -> None:
        self._remove(crew_id)


class MemoryCrewMemberRepository(MemoryTable, CrewMemberRepository):
    """Crew membership storage; finders attach the member's user."""

    table_name = "crew_members"

    def _detach(self, entity: CrewMember) -> CrewMember:
        return dataclasses.replace(copy.deepcopy(entity), user=None)

    def _with_user(self, member: CrewMember | None) -> CrewMember | None:
        if member is not None:
            member.user = self._load_user(member.user_id)
        return member

    async def create(self, member: CrewMember) -> None:
        self._insert(member)

    async def find_by_id(self, member_id: uuid.UUID) -> CrewMember | None:
        return self._with_user(self._first(lambda row: row.id == member_id))

    async def find_by_crew_id(self, crew_id: uuid.UUID) -> list[CrewMember]:
        return [
            self._with_user(row)
            for row in self._select(lambda row: row.crew_id == crew_id)
        ]

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[CrewMember]:
        return self._select(lambda row: row.user_id == user_id)

    async def delete(self, member_id: uuid.UUID) -> None:
        self._remove(member_id)

    async def delete_by_crew_and_user(
        self, crew_id: uuid.UUID, user_id: uuid.UUID
    ) -> int:
        doomed = [
            row.id
            for row in self.rows.values()
            if row.crew_id == crew_id and row.user_id == user_id
        ]
        for member_id in doomed:
            self._remove(member_id)
        return len(doomed)
