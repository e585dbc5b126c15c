"""In-memory permission repository for development and tests."""

import copy
import dataclasses
import uuid

from workforce.domain.entities import Permission
from workforce.infrastructure.implementations.memory.store import MemoryTable
from workforce.infrastructure.repositories.permission_repository import (
    PermissionRepository,
)


class MemoryPermissionRepository(MemoryTable, PermissionRepository):
    """Permission storage backed by a shared MemoryStore."""

    table_name = "permissions"

    def _detach(self, entity: Permission) -> Permission:
        return dataclasses.replace(copy.deepcopy(entity), role=None)

    def _with_role(self, permission: Permission | None) -> Permission | None:
        if permission is not None:
            permission.role = self._load_role(permission.role_id)
        return permission

    async def create(self, permission: Permission) -> None:
        self._insert(permission)

    async def find_by_id(self, permission_id: uuid.UUID) -> Permission | None:
        return self._with_role(self._first(lambda row: row.id == permission_id))

    async def find_by_role_id(self, role_id: uuid.UUID) -> list[Permission]:
        return [
            self._with_role(row)
            for row in self._select(lambda row: row.role_id == role_id)
        ]

    async def find_by_role_and_module(
        self, role_id: uuid.UUID, module_name: str
    ) -> Permission | None:
        return self._with_role(
            self._first(
                lambda row: row.role_id == role_id and row.module_name == module_name
            )
        )

    async def find_all(self) -> list[Permission]:
        return [self._with_role(row) for row in self._select()]

    async def update(self, permission: Permission) -> None:
        self._replace(permission)

    async def delete(self, permission_id: uuid.UUID) -> None:
        self._remove(permission_id)

    async def delete_by_role_id(self, role_id: uuid.UUID) -> int:
        doomed = [row.id for row in self.rows.values() if row.role_id == role_id]
        for permission_id in doomed:
            self._remove(permission_id)
        return len(doomed)
