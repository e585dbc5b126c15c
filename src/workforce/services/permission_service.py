"""Permission service: CRUD flags granted to a role on a module."""

import uuid

from loguru import logger

from workforce.domain.entities import Permission, Role
from workforce.domain.exceptions import ConflictError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import (
    PermissionRepository,
    RoleRepository,
)
from workforce.models.permission import (
    CreatePermissionRequest,
    PermissionResponse,
    UpdatePermissionRequest,
)
from workforce.services.base import BaseService


class PermissionService(BaseService):
    """
    Manage permissions.

    A role holds at most one permission per module; the pair is checked on
    create and whenever either half changes.
    """

    entity_name = "permission"

    def __init__(
        self,
        permissions: PermissionRepository,
        roles: RoleRepository,
        publisher: EventPublisher | None = None,
    ):
        super().__init__(publisher)
        self.permissions = permissions
        self.roles = roles

    async def _load(self, permission_id: str | uuid.UUID) -> Permission:
        return await self._load_reference(self.permissions, permission_id, "permission")

    async def _load_role(self, role_id: str | uuid.UUID) -> Role:
        return await self._load_reference(self.roles, role_id, "role")

    async def _ensure_module_free(
        self,
        role_id: uuid.UUID,
        module_name: str,
        permission_id: uuid.UUID | None = None,
    ) -> None:
        with self._store("look up permission"):
            existing = await self.permissions.find_by_role_and_module(
                role_id, module_name
            )
        if existing is not None and existing.id != permission_id:
            raise ConflictError(
                f"permission for module '{module_name}' already exists for role"
            )

    @staticmethod
    def _payload(permission: Permission) -> dict:
        return {
            "permission_id": str(permission.id),
            "role_id": str(permission.role_id),
            "module_name": permission.module_name,
        }

    @staticmethod
    def _deleted_payload(permission: Permission) -> dict:
        return {"permission_id": str(permission.id), "role_id": str(permission.role_id)}

    async def create(self, request: CreatePermissionRequest) -> PermissionResponse:
        role = await self._load_role(request.role_id)
        await self._ensure_module_free(role.id, request.module_name)

        now = self._now()
        permission = Permission(
            id=uuid.uuid4(),
            role_id=role.id,
            module_name=request.module_name,
            can_create=request.can_create,
            can_read=request.can_read,
            can_update=request.can_update,
            can_delete=request.can_delete,
            created_at=now,
            updated_at=now,
        )
        with self._store("create permission"):
            await self.permissions.create(permission)

        logger.info(
            f"Created permission {permission.id} ({permission.module_name}) "
            f"for role {role.id}"
        )
        await self._publish("PermissionCreated", self._payload(permission))
        permission.role = role
        return PermissionResponse.model_validate(permission)

    async def get(self, permission_id: str | uuid.UUID) -> PermissionResponse:
        return PermissionResponse.model_validate(await self._load(permission_id))

    async def list_all(self) -> list[PermissionResponse]:
        with self._store("list permissions"):
            permissions = await self.permissions.find_all()
        return [PermissionResponse.model_validate(p) for p in permissions]

    async def list_for_role(self, role_id: str | uuid.UUID) -> list[PermissionResponse]:
        parsed = self._parse_id(role_id, "role id")
        with self._store("list permissions"):
            permissions = await self.permissions.find_by_role_id(parsed)
        return [PermissionResponse.model_validate(p) for p in permissions]

    async def get_for_role_module(
        self, role_id: str | uuid.UUID, module_name: str
    ) -> PermissionResponse:
        parsed = self._parse_id(role_id, "role id")
        with self._store("look up permission"):
            permission = await self.permissions.find_by_role_and_module(
                parsed, module_name
            )
        return PermissionResponse.model_validate(
            self._require(permission, "permission")
        )

    async def update(
        self, permission_id: str | uuid.UUID, request: UpdatePermissionRequest
    ) -> PermissionResponse:
        """
        Apply the supplied fields; an explicit ``false`` revokes a capability.

        Raises:
            NotFoundError: No such permission, or the new role does not exist
            ConflictError: The role already has a permission for the module
        """
        permission = await self._load(permission_id)
        changes = self._changes(request)

        if "role_id" in changes:
            role = await self._load_role(changes["role_id"])
            changes["role_id"] = role.id
            permission.role = role

        role_id = changes.get("role_id", permission.role_id)
        module_name = changes.get("module_name", permission.module_name)
        if (role_id, module_name) != (permission.role_id, permission.module_name):
            await self._ensure_module_free(role_id, module_name, permission.id)

        for name, value in changes.items():
            setattr(permission, name, value)
        permission.updated_at = self._now()

        with self._store("update permission"):
            await self.permissions.update(permission)

        logger.info(f"Updated permission {permission.id}")
        await self._publish("PermissionUpdated", self._payload(permission))
        return PermissionResponse.model_validate(permission)

    async def delete(self, permission_id: str | uuid.UUID) -> None:
        permission = await self._load(permission_id)

        with self._store("delete permission"):
            await self.permissions.delete(permission.id)

        logger.info(f"Deleted permission {permission.id}")
        await self._publish("PermissionDeleted", self._deleted_payload(permission))

    async def delete_for_role(self, role_id: str | uuid.UUID) -> int:
        """
        Delete every permission of a role.

        Publishes one PermissionDeleted per removed permission.

        Returns:
            Number of permissions removed
        """
        parsed = self._parse_id(role_id, "role id")
        with self._store("delete permissions"):
            doomed = await self.permissions.find_by_role_id(parsed)
            removed = await self.permissions.delete_by_role_id(parsed)

        logger.info(f"Deleted {removed} permission(s) of role {parsed}")
        for permission in doomed:
            await self._publish("PermissionDeleted", self._deleted_payload(permission))
        return removed
