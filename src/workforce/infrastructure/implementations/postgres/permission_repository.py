"""Relational permission repository."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from workforce.domain.entities import Permission
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_permission,
    permission_from_row,
    permission_to_row,
)
from workforce.infrastructure.implementations.postgres.tables import PermissionRow
from workforce.infrastructure.repositories.permission_repository import (
    PermissionRepository,
)


class PostgresPermissionRepository(PostgresRepository, PermissionRepository):
    """Permission storage; finders load the owning role."""

    def _select(self):
        return (
            select(PermissionRow)
            .options(selectinload(PermissionRow.role))
            .order_by(PermissionRow.created_at)
        )

    async def _fetch(self, statement) -> list[Permission]:
        async with self.database.session() as session:
            rows = await session.scalars(statement)
            return [permission_from_row(row, with_role=True) for row in rows]

    async def create(self, permission: Permission) -> None:
        async with self.database.session() as session:
            session.add(permission_to_row(permission))

    async def find_by_id(self, permission_id: uuid.UUID) -> Permission | None:
        found = await self._fetch(
            self._select().where(PermissionRow.id == permission_id)
        )
        return found[0] if found else None

    async def find_by_role_id(self, role_id: uuid.UUID) -> list[Permission]:
        return await self._fetch(self._select().where(PermissionRow.role_id == role_id))

    async def find_by_role_and_module(
        self, role_id: uuid.UUID, module_name: str
    ) -> Permission | None:
        found = await self._fetch(
            self._select()
            .where(PermissionRow.role_id == role_id)
            .where(PermissionRow.module_name == module_name)
            .limit(1)
        )
        return found[0] if found else None

    async def find_all(self) -> list[Permission]:
        return await self._fetch(self._select())

    async def update(self, permission: Permission) -> None:
        async with self.database.session() as session:
            row = await session.get(PermissionRow, permission.id)
            if row is None:
                raise StoreError(f"permissions row {permission.id} does not exist")
            apply_permission(row, permission)

    async def delete(self, permission_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(
                delete(PermissionRow).where(PermissionRow.id == permission_id)
            )

    async def delete_by_role_id(self, role_id: uuid.UUID) -> int:
        async with self.database.session() as session:
            result = await session.execute(
                delete(PermissionRow).where(PermissionRow.role_id == role_id)
            )
            return result.rowcount or 0
