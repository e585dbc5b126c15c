"""In-memory attendance repository for development and tests."""

import copy
import dataclasses
import uuid
from datetime import UTC, date, datetime

from workforce.domain.entities import Attendance
from workforce.infrastructure.implementations.memory.store import MemoryTable
from workforce.infrastructure.repositories.attendance_repository import (
    AttendanceRepository,
)


class MemoryAttendanceRepository(MemoryTable, AttendanceRepository):
    """Attendance storage; lists are newest-first by ``created_at``."""

    table_name = "attendance"

    def _detach(self, entity: Attendance) -> Attendance:
        return dataclasses.replace(copy.deepcopy(entity), user=None)

    def _with_user(self, attendance: Attendance | None) -> Attendance | None:
        if attendance is not None:
            attendance.user = self._load_user(attendance.user_id)
        return attendance

    async def create(self, attendance: Attendance) -> None:
        self._insert(attendance)

    async def find_by_id(self, attendance_id: uuid.UUID) -> Attendance | None:
        return self._with_user(self._first(lambda row: row.id == attendance_id))

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Attendance]:
        rows = self._select(
            lambda row: row.user_id == user_id, newest_first_by="created_at"
        )
        return [self._with_user(row) for row in rows]

    async def find_by_user_and_date(
        self, user_id: uuid.UUID, day: date
    ) -> Attendance | None:
        return self._with_user(
            self._first(
                lambda row: row.user_id == user_id
                and row.created_at.astimezone(UTC).date() == day
            )
        )

    async def find_by_date_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> list[Attendance]:
        rows = self._select(
            lambda row: row.user_id == user_id and start <= row.created_at <= end,
            newest_first_by="created_at",
        )
        return [self._with_user(row) for row in rows]

    async def find_all(self) -> list[Attendance]:
        rows = self._select(newest_first_by="created_at")
        return [self._with_user(row) for row in rows]

    async def update(self, attendance: Attendance) -> None:
        self._replace(attendance)

    async def delete(self, attendance_id: uuid.UUID) -> None:
        self._remove(attendance_id)
