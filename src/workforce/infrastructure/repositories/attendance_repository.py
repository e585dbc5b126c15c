"""
Abstract interface for attendance storage.

Lists are returned newest-first by creation time. At most one record per user
per calendar day is expected; ``find_by_user_and_date`` is the only place
that convention is expressed.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import date, datetime

from workforce.domain.entities import Attendance


class AttendanceRepository(ABC):
    """Abstract interface for attendance persistence operations."""

    @abstractmethod
    async def create(self, attendance: Attendance) -> None:
        """Persist a new attendance record."""
        pass

    @abstractmethod
    async def find_by_id(self, attendance_id: uuid.UUID) -> Attendance | None:
        """Retrieve an attendance record with its user, or None."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Attendance]:
        """List a user's attendance records, newest first."""
        pass

    @abstractmethod
    async def find_by_user_and_date(
        self, user_id: uuid.UUID, day: date
    ) -> Attendance | None:
        """
        Retrieve the attendance record created for a user on a day.

        Args:
            user_id: User identifier
            day: Calendar day (UTC) the record was created on

        Returns:
            First matching record, None when the user has none that day
        """
        pass

    @abstractmethod
    async def find_by_date_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> list[Attendance]:
        """
        List a user's records created within ``[start, end]``, newest first.
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Attendance]:
        """List all attendance records, newest first."""
        pass

    @abstractmethod
    async def update(self, attendance: Attendance) -> None:
        """Overwrite a stored attendance record."""
        pass

    @abstractmethod
    async def delete(self, attendance_id: uuid.UUID) -> None:
        """Delete an attendance record."""
        pass
