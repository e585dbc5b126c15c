"""Relational role repository."""

import uuid

from loguru import logger
from sqlalchemy import delete, select

from workforce.domain.entities import Role
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_role,
    role_from_row,
    role_to_row,
)
from workforce.infrastructure.implementations.postgres.tables import RoleRow
from workforce.infrastructure.repositories.role_repository import RoleRepository


class PostgresRoleRepository(PostgresRepository, RoleRepository):
    """Role storage on the ``roles`` table (``role_name`` is unique)."""

    async def create(self, role: Role) -> None:
        async with self.database.session() as session:
            session.add(role_to_row(role))
        logger.debug(f"Inserted role {role.id}")

    async def find_by_id(self, role_id: uuid.UUID) -> Role | None:
        async with self.database.session() as session:
            row = await session.get(RoleRow, role_id)
            return role_from_row(row) if row else None

    async def find_by_name(self, name: str) -> Role | None:
        async with self.database.session() as session:
            row = await session.scalar(select(RoleRow).where(RoleRow.role_name == name))
            return role_from_row(row) if row else None

    async def find_all(self) -> list[Role]:
        async with self.database.session() as session:
            rows = await session.scalars(select(RoleRow).order_by(RoleRow.created_at))
            return [role_from_row(row) for row in rows]

    async def update(self, role: Role) -> None:
        async with self.database.session() as session:
            row = await session.get(RoleRow, role.id)
            if row is None:
                raise StoreError(f"roles row {role.id} does not exist")
            apply_role(row, role)

    async def delete(self, role_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(delete(RoleRow).where(RoleRow.id == role_id))
