"""Relational attendance repository."""

import uuid
from datetime import UTC, date, datetime, time, timedelta

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from workforce.domain.entities import Attendance
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_attendance,
    attendance_from_row,
    attendance_to_row,
    utc,
)
from workforce.infrastructure.implementations.postgres.tables import AttendanceRow
from workforce.infrastructure.repositories.attendance_repository import (
    AttendanceRepository,
)


class PostgresAttendanceRepository(PostgresRepository, AttendanceRepository):
    """Attendance storage; lists are newest-first by ``created_at``."""

    def _select(self):
        return (
            select(AttendanceRow)
            .options(selectinload(AttendanceRow.user))
            .order_by(AttendanceRow.created_at.desc())
        )

    async def _fetch(self, statement) -> list[Attendance]:
        async with self.database.session() as session:
            rows = await session.scalars(statement)
            return [attendance_from_row(row, with_user=True) for row in rows]

    async def create(self, attendance: Attendance) -> None:
        async with self.database.session() as session:
            session.add(attendance_to_row(attendance))

    async def find_by_id(self, attendance_id: uuid.UUID) -> Attendance | None:
        found = await self._fetch(
            self._select().where(AttendanceRow.id == attendance_id)
        )
        return found[0] if found else None

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Attendance]:
        return await self._fetch(
            self._select().where(AttendanceRow.user_id == user_id)
        )

    async def find_by_user_and_date(
        self, user_id: uuid.UUID, day: date
    ) -> Attendance | None:
        start = datetime.combine(day, time.min, tzinfo=UTC)
        found = await self._fetch(
            self._select()
            .where(AttendanceRow.user_id == user_id)
            .where(AttendanceRow.created_at >= start)
            .where(AttendanceRow.created_at < start + timedelta(days=1))
            .order_by(None)
            .order_by(AttendanceRow.created_at.asc())
            .limit(1)
        )
        return found[0] if found else None

    async def find_by_date_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> list[Attendance]:
        return await self._fetch(
            self._select()
            .where(AttendanceRow.user_id == user_id)
            .where(AttendanceRow.created_at >= utc(start))
            .where(AttendanceRow.created_at <= utc(end))
        )

    async def find_all(self) -> list[Attendance]:
        return await self._fetch(self._select())

    async def update(self, attendance: Attendance) -> None:
        async with self.database.session() as session:
            row = await session.get(AttendanceRow, attendance.id)
            if row is None:
                raise StoreError(f"attendance row {attendance.id} does not exist")
            apply_attendance(row, attendance)

    async def delete(self, attendance_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(
                delete(AttendanceRow).where(AttendanceRow.id == attendance_id)
            )
