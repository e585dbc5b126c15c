"""Abstract interface for time-off storage. Lists are newest-first by start date."""

import uuid
from abc import ABC, abstractmethod
from datetime import date

from workforce.domain.entities import TimeOff, TimeOffStatus


class TimeOffRepository(ABC):
    """Abstract interface for time-off persistence operations."""

    @abstractmethod
    async def create(self, time_off: TimeOff) -> None:
        pass

    @abstractmethod
    async def find_by_id(self, time_off_id: uuid.UUID) -> TimeOff | None:
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: uuid.UUID) -> list[TimeOff]:
        pass

    @abstractmethod
    async def find_by_status(self, status: TimeOffStatus) -> list[TimeOff]:
        pass

    @abstractmethod
    async def find_by_date_range(self, start: date, end: date) -> list[TimeOff]:
        """
        List time off overlapping ``[start, end]``.

        A record overlaps when it starts on or before ``end`` and ends on or
        after ``start``.
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[TimeOff]:
        pass

    @abstractmethod
    async def update(self, time_off: TimeOff) -> None:
        pass

    @abstractmethod
    async def delete(self, time_off_id: uuid.UUID) -> None:
        pass
