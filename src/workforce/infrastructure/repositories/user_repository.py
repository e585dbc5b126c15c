"""
Abstract interface for user storage.

Users carry two natural keys (employee id and e-mail). Every finder attaches
the assigned role, when the user has one.
"""

import uuid
from abc import ABC, abstractmethod

from workforce.domain.entities import User


class UserRepository(ABC):
    """
    Abstract interface for user persistence operations.

    Implementations must raise ConstraintViolationError when the store
    rejects a duplicate employee id or e-mail.
    """

    @abstractmethod
    async def create(self, user: User) -> None:
        """
        Persist a new user.

        Args:
            user: Fully populated user entity

        Raises:
            ConstraintViolationError: If employee id or e-mail already exists
            StoreError: If the storage operation fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: uuid.UUID) -> User | None:
        """
        Retrieve a user by identifier.

        Returns:
            User with its role attached if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Retrieve a user by e-mail address, or None."""
        pass

    @abstractmethod
    async def find_by_employee_id(self, employee_id: str) -> User | None:
        """Retrieve a user by employee id, or None."""
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """List all users in creation order."""
        pass

    @abstractmethod
    async def find_by_role_id(self, role_id: uuid.UUID) -> list[User]:
        """List the users assigned to a role."""
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Overwrite a stored user."""
        pass

    @abstractmethod
    async def delete(self, user_id: uuid.UUID) -> None:
        """Delete a user."""
        pass
