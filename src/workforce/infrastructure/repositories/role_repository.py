"""
Abstract interface for role storage.

Roles are looked up by identifier and by their unique name. The name lookup
backs the uniqueness pre-check performed by the role service.
"""

import uuid
from abc import ABC, abstractmethod

from workforce.domain.entities import Role


class RoleRepository(ABC):
    """
    Abstract interface for role persistence operations.

    Implementations must:
    - Return None (never raise) when a single-row lookup finds nothing
    - Raise StoreError on storage failure
    - Raise ConstraintViolationError when the store rejects a duplicate name
    """

    @abstractmethod
    async def create(self, role: Role) -> None:
        """
        Persist a new role.

        Args:
            role: Fully populated role entity

        Raises:
            ConstraintViolationError: If the role name already exists in the store
            StoreError: If the storage operation fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, role_id: uuid.UUID) -> Role | None:
        """
        Retrieve a role by identifier.

        Args:
            role_id: Role identifier

        Returns:
            Role if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Role | None:
        """
        Retrieve a role by its unique name.

        Args:
            name: Exact role name

        Returns:
            Role if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Role]:
        """
        List all roles in creation order.

        Returns:
            List of roles (possibly empty)
        """
        pass

    @abstractmethod
    async def update(self, role: Role) -> None:
        """
        Overwrite a stored role with the given state.

        Args:
            role: Role entity carrying the new field values

        Raises:
            ConstraintViolationError: If the new name collides in the store
            StoreError: If the storage operation fails
        """
        pass

    @abstractmethod
    async def delete(self, role_id: uuid.UUID) -> None:
        """
        Delete a role. Dependent users and permissions are left untouched.

        Args:
            role_id: Role identifier

        Raises:
            StoreError: If the storage operation fails
        """
        pass
