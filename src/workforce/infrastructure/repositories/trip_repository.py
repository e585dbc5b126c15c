"""Abstract interface for trip storage."""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime

from workforce.domain.entities import Trip


class TripRepository(ABC):
    """
    Abstract interface for trip persistence operations.

    Lists are returned newest-first by departure time.
    """

    @abstractmethod
    async def create(self, trip: Trip) -> None:
        """Persist a new trip."""
        pass

    @abstractmethod
    async def find_by_id(self, trip_id: uuid.UUID) -> Trip | None:
        """Retrieve a trip with its user, or None."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Trip]:
        """List a user's trips."""
        pass

    @abstractmethod
    async def find_by_date_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> list[Trip]:
        """List a user's trips departing within ``[start, end]``."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Trip]:
        """List all trips."""
        pass

    @abstractmethod
    async def update(self, trip: Trip) -> None:
        """Overwrite a stored trip."""
        pass

    @abstractmethod
    async def delete(self, trip_id: uuid.UUID) -> None:
        """Delete a trip."""
        pass
