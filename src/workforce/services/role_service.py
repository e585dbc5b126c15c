"""Role service: validated CRUD over roles."""

import uuid

from loguru import logger

from workforce.domain.entities import Role
from workforce.domain.exceptions import ConflictError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import RoleRepository
from workforce.models.role import CreateRoleRequest, RoleResponse, UpdateRoleRequest
from workforce.services.base import BaseService


class RoleService(BaseService):
    """
    Create, read, update and delete roles.

    Role names are unique. Events: RoleCreated, RoleUpdated, RoleDeleted,
    each carrying ``role_id`` and ``role_name``.
    """

    entity_name = "role"

    def __init__(self, roles: RoleRepository, publisher: EventPublisher | None = None):
        super().__init__(publisher)
        self.roles = roles

    async def _load(self, role_id: str | uuid.UUID) -> Role:
        return await self._load_reference(self.roles, role_id, "role")

    async def _ensure_name_free(self, name: str, role_id: uuid.UUID | None = None):
        with self._store("look up role"):
            existing = await self.roles.find_by_name(name)
        if existing is not None and existing.id != role_id:
            raise ConflictError(f"role with name '{name}' already exists")

    @staticmethod
    def _payload(role: Role) -> dict:
        return {"role_id": str(role.id), "role_name": role.role_name}

    async def create(self, request: CreateRoleRequest) -> RoleResponse:
        """
        Create a role.

        Raises:
            ConflictError: A role with the same name exists
            PersistenceError: The store failed
        """
        await self._ensure_name_free(request.role_name)

        now = self._now()
        role = Role(
            id=uuid.uuid4(),
            role_name=request.role_name,
            description=request.description,
            created_at=now,
            updated_at=now,
        )
        with self._store("create role"):
            await self.roles.create(role)

        logger.info(f"Created role {role.id} ({role.role_name})")
        await self._publish("RoleCreated", self._payload(role))
        return RoleResponse.model_validate(role)

    async def get(self, role_id: str | uuid.UUID) -> RoleResponse:
        return RoleResponse.model_validate(await self._load(role_id))

    async def list_all(self) -> list[RoleResponse]:
        with self._store("list roles"):
            roles = await self.roles.find_all()
        return [RoleResponse.model_validate(role) for role in roles]

    async def update(
        self, role_id: str | uuid.UUID, request: UpdateRoleRequest
    ) -> RoleResponse:
        """
        Apply the supplied fields to a role.

        Renaming a role to its current name is not a conflict.

        Raises:
            InvalidArgumentError: Malformed id
            NotFoundError: No such role
            ConflictError: Another role already uses the new name
        """
        role = await self._load(role_id)
        changes = self._changes(request)

        if "role_name" in changes and changes["role_name"] != role.role_name:
            await self._ensure_name_free(changes["role_name"], role.id)

        for name, value in changes.items():
            setattr(role, name, value)
        role.updated_at = self._now()

        with self._store("update role"):
            await self.roles.update(role)

        logger.info(f"Updated role {role.id}")
        await self._publish("RoleUpdated", self._payload(role))
        return RoleResponse.model_validate(role)

    async def delete(self, role_id: str | uuid.UUID) -> None:
        """Delete a role. Users and permissions referencing it are left in place."""
        role = await self._load(role_id)

        with self._store("delete role"):
            await self.roles.delete(role.id)

        logger.info(f"Deleted role {role.id}")
        await self._publish("RoleDeleted", self._payload(role))
