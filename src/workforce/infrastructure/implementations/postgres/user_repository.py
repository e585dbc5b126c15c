"""Relational user repository."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from workforce.domain.entities import User
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_user,
    user_from_row,
    user_to_row,
)
from workforce.infrastructure.implementations.postgres.tables import UserRow
from workforce.infrastructure.repositories.user_repository import UserRepository


class PostgresUserRepository(PostgresRepository, UserRepository):
    """
    User storage on the ``workforce_users`` table.

    Employee id and e-mail carry unique constraints; every finder loads the
    user's role.
    """

    def _select(self):
        return (
            select(UserRow)
            .options(selectinload(UserRow.role))
            .order_by(UserRow.created_at)
        )

    async def _fetch(self, statement) -> list[User]:
        async with self.database.session() as session:
            rows = await session.scalars(statement)
            return [user_from_row(row, with_role=True) for row in rows]

    async def _fetch_one(self, statement) -> User | None:
        found = await self._fetch(statement.limit(1))
        return found[0] if found else None

    async def create(self, user: User) -> None:
        async with self.database.session() as session:
            session.add(user_to_row(user))

    async def find_by_id(self, user_id: uuid.UUID) -> User | None:
        return await self._fetch_one(self._select().where(UserRow.id == user_id))

    async def find_by_email(self, email: str) -> User | None:
        return await self._fetch_one(self._select().where(UserRow.email == email))

    async def find_by_employee_id(self, employee_id: str) -> User | None:
        return await self._fetch_one(
            self._select().where(UserRow.employee_id == employee_id)
        )

    async def find_all(self) -> list[User]:
        return await self._fetch(self._select())

    async def find_by_role_id(self, role_id: uuid.UUID) -> list[User]:
        return await self._fetch(self._select().where(UserRow.role_id == role_id))

    async def update(self, user: User) -> None:
        async with self.database.session() as session:
            row = await session.get(UserRow, user.id)
            if row is None:
                raise StoreError(f"workforce_users row {user.id} does not exist")
            apply_user(row, user)

    async def delete(self, user_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(delete(UserRow).where(UserRow.id == user_id))
