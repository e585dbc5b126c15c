"""
Abstract interface for permission storage.

Every finder attaches the owning role to the returned permissions.
"""

import uuid
from abc import ABC, abstractmethod

from workforce.domain.entities import Permission


class PermissionRepository(ABC):
    """Abstract interface for permission persistence operations."""

    @abstractmethod
    async def create(self, permission: Permission) -> None:
        """Persist a new permission."""
        pass

    @abstractmethod
    async def find_by_id(self, permission_id: uuid.UUID) -> Permission | None:
        """Retrieve a permission by identifier, or None."""
        pass

    @abstractmethod
    async def find_by_role_id(self, role_id: uuid.UUID) -> list[Permission]:
        """List the permissions granted to a role."""
        pass

    @abstractmethod
    async def find_by_role_and_module(
        self, role_id: uuid.UUID, module_name: str
    ) -> Permission | None:
        """
        Retrieve the permission a role holds on a module.

        The (role, module) pair is not a stored constraint; callers use this
        lookup to keep it unique.

        Args:
            role_id: Role identifier
            module_name: Exact module name

        Returns:
            Permission if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Permission]:
        """List all permissions in creation order."""
        pass

    @abstractmethod
    async def update(self, permission: Permission) -> None:
        """Overwrite a stored permission."""
        pass

    @abstractmethod
    async def delete(self, permission_id: uuid.UUID) -> None:
        """Delete a permission."""
        pass

    @abstractmethod
    async def delete_by_role_id(self, role_id: uuid.UUID) -> int:
        """
        Delete every permission of a role.

        Args:
            role_id: Role identifier

        Returns:
            Number of permissions removed
        """
        pass
