"""Relational crew and crew membership repositories."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from workforce.domain.entities import Crew, CrewMember
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_crew,
    crew_from_row,
    crew_member_from_row,
    crew_member_to_row,
    crew_to_row,
)
from workforce.infrastructure.implementations.postgres.tables import (
    CrewMemberRow,
    CrewRow,
)
from workforce.infrastructure.repositories.crew_repository import (
    CrewMemberRepository,
    CrewRepository,
)


class PostgresCrewRepository(PostgresRepository, CrewRepository):
    """Crew storage; finders load members together with their users."""

    def _select(self):
        return (
            select(CrewRow)
            .options(selectinload(CrewRow.members).selectinload(CrewMemberRow.user))
            .order_by(CrewRow.created_at)
        )

    async def create(self, crew: Crew) -> None:
        async with self.database.session() as session:
            session.add(crew_to_row(crew))

    async def find_by_id(self, crew_id: uuid.UUID) -> Crew | None:
        async with self.database.session() as session:
            row = await session.scalar(self._select().where(CrewRow.id == crew_id))
            return crew_from_row(row, with_members=True) if row else None

    async def find_all(self) -> list[Crew]:
        async with self.database.session() as session:
            rows = await session.scalars(self._select())
            return [crew_from_row(row, with_members=True) for row in rows]

    async def update(self, crew: Crew) -> None:
        async with self.database.session() as session:
            row = await session.get(CrewRow, crew.id)
            if row is None:
                raise StoreError(f"crews row {crew.id} does not exist")
            apply_crew(row, crew)

    async def delete(self, crew_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(delete(CrewRow).where(CrewRow.id == crew_id))


class PostgresCrewMemberRepository(PostgresRepository, CrewMemberRepository):
    """Membership rows on the ``crew_members`` table."""

    async def create(self, member: CrewMember) -> None:
        async with self.database.session() as session:
            session.add(crew_member_to_row(member))

    async def find_by_id(self, member_id: uuid.UUID) -> CrewMember | None:
        async with self.database.session() as session:
            row = await session.scalar(
                select(CrewMemberRow)
                .options(selectinload(CrewMemberRow.user))
                .where(CrewMemberRow.id == member_id)
            )
            return crew_member_from_row(row, with_user=True) if row else None

    async def find_by_crew_id(self, crew_id: uuid.UUID) -> list[CrewMember]:
        async with self.database.session() as session:
            rows = await session.scalars(
                select(CrewMemberRow)
                .options(selectinload(CrewMemberRow.user))
                .where(CrewMemberRow.crew_id == crew_id)
                .order_by(CrewMemberRow.assigned_at)
            )
            return [crew_member_from_row(row, with_user=True) for row in rows]

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[CrewMember]:
        async with self.database.session() as session:
            rows = await session.scalars(
                select(CrewMemberRow)
                .where(CrewMemberRow.user_id == user_id)
                .order_by(CrewMemberRow.assigned_at)
            )
            return [crew_member_from_row(row) for row in rows]

    async def delete(self, member_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(
                delete(CrewMemberRow).where(CrewMemberRow.id == member_id)
            )

    async def delete_by_crew_and_user(
        self, crew_id: uuid.UUID, user_id: uuid.UUID
    ) -> int:
        async with self.database.session() as session:
            result = await session.execute(
                delete(CrewMemberRow)
                .where(CrewMemberRow.crew_id == crew_id)
                .where(CrewMemberRow.user_id == user_id)
            )
            return result.rowcount or 0
