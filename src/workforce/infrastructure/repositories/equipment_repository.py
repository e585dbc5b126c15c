"""Abstract interface for equipment storage."""

import uuid
from abc import ABC, abstractmethod

from workforce.domain.entities import Equipment


class EquipmentRepository(ABC):
    """
    Abstract interface for equipment persistence operations.

    Serial numbers are unique when present; equipment without a serial
    number is never considered a duplicate.
    """

    @abstractmethod
    async def create(self, equipment: Equipment) -> None:
        """Persist new equipment."""
        pass

    @abstractmethod
    async def find_by_id(self, equipment_id: uuid.UUID) -> Equipment | None:
        """Retrieve equipment with its assigned user, or None."""
        pass

    @abstractmethod
    async def find_by_serial_number(self, serial_number: str) -> Equipment | None:
        """Retrieve equipment by serial number, or None."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Equipment]:
        """List the equipment assigned to a user."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Equipment]:
        """List all equipment in creation order."""
        pass

    @abstractmethod
    async def update(self, equipment: Equipment) -> None:
        """Overwrite stored equipment."""
        pass

    @abstractmethod
    async def delete(self, equipment_id: uuid.UUID) -> None:
        """Delete equipment."""
        pass
