"""Relational time-off repository."""

import uuid
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from workforce.domain.entities import TimeOff, TimeOffStatus
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_time_off,
    time_off_from_row,
    time_off_to_row,
)
from workforce.infrastructure.implementations.postgres.tables import TimeOffRow
from workforce.infrastructure.repositories.time_off_repository import (
    TimeOffRepository,
)


class PostgresTimeOffRepository(PostgresRepository, TimeOffRepository):
    """Time-off storage; lists are newest-first by ``start_date``."""

    def _select(self):
        return (
            select(TimeOffRow)
            .options(selectinload(TimeOffRow.user))
            .order_by(TimeOffRow.start_date.desc(), TimeOffRow.created_at.desc())
        )

    async def _fetch(self, statement) -> list[TimeOff]:
        async with self.database.session() as session:
            rows = await session.scalars(statement)
            return [time_off_from_row(row, with_user=True) for row in rows]

    async def create(self, time_off: TimeOff) -> None:
        async with self.database.session() as session:
            session.add(time_off_to_row(time_off))

    async def find_by_id(self, time_off_id: uuid.UUID) -> TimeOff | None:
        found = await self._fetch(self._select().where(TimeOffRow.id == time_off_id))
        return found[0] if found else None

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[TimeOff]:
        return await self._fetch(self._select().where(TimeOffRow.user_id == user_id))

    async def find_by_status(self, status: TimeOffStatus) -> list[TimeOff]:
        return await self._fetch(
            self._select().where(TimeOffRow.status == TimeOffStatus(status).value)
        )

    async def find_by_date_range(self, start: date, end: date) -> list[TimeOff]:
        return await self._fetch(
            self._select()
            .where(TimeOffRow.start_date <= end)
            .where(TimeOffRow.end_date >= start)
        )

    async def find_all(self) -> list[TimeOff]:
        return await self._fetch(self._select())

    async def update(self, time_off: TimeOff) -> None:
        async with self.database.session() as session:
            row = await session.get(TimeOffRow, time_off.id)
            if row is None:
                raise StoreError(f"time_off row {time_off.id} does not exist")
            apply_time_off(row, time_off)

    async def delete(self, time_off_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(
                delete(TimeOffRow).where(TimeOffRow.id == time_off_id)
            )
