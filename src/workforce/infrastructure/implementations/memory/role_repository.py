"""In-memory role repository for development and tests."""

import uuid

from loguru import logger

from workforce.domain.entities import Role
from workforce.infrastructure.implementations.memory.store import (
    MemoryStore,
    MemoryTable,
)
from workforce.infrastructure.repositories.role_repository import RoleRepository


class MemoryRoleRepository(MemoryTable, RoleRepository):
    """
    Role storage backed by a shared MemoryStore.

    Role names are unique, like the ``roles.role_name`` column of the
    relational schema.
    """

    table_name = "roles"
    unique_fields = ("role_name",)

    def __init__(self, store: MemoryStore):
        super().__init__(store)
        logger.debug("Initialized MemoryRoleRepository")

    async def create(self, role: Role) -> None:
        self._insert(role)
        logger.debug(f"Stored role {role.id} ({role.role_name})")

    async def find_by_id(self, role_id: uuid.UUID) -> Role | None:
        return self._first(lambda row: row.id == role_id)

    async def find_by_name(self, name: str) -> Role | None:
        return self._first(lambda row: row.role_name == name)

    async def find_all(self) -> list[Role]:
        return self._select()

    async def update(self, role: Role) -> None:
        self._replace(role)

    async def delete(self, role_id: uuid.UUID) -> None:
        self._remove(role_id)
        logger.debug(f"Deleted role {role_id}")
