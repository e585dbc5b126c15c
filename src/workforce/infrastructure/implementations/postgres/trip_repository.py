"""Relational trip repository."""

import uuid
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from workforce.domain.entities import Trip
from workforce.domain.exceptions import StoreError
from workforce.infrastructure.implementations.postgres.base import PostgresRepository
from workforce.infrastructure.implementations.postgres.mappers import (
    apply_trip,
    trip_from_row,
    trip_to_row,
    utc,
)
from workforce.infrastructure.implementations.postgres.tables import TripRow
from workforce.infrastructure.repositories.trip_repository import TripRepository


class PostgresTripRepository(PostgresRepository, TripRepository):
    """Trip storage; lists are newest-first by departure time."""

    def _select(self):
        return (
            select(TripRow)
            .options(selectinload(TripRow.user))
            .order_by(TripRow.start_time.desc())
        )

    async def _fetch(self, statement) -> list[Trip]:
        async with self.database.session() as session:
            rows = await session.scalars(statement)
            return [trip_from_row(row, with_user=True) for row in rows]

    async def create(self, trip: Trip) -> None:
        async with self.database.session() as session:
            session.add(trip_to_row(trip))

    async def find_by_id(self, trip_id: uuid.UUID) -> Trip | None:
        found = await self._fetch(self._select().where(TripRow.id == trip_id))
        return found[0] if found else None

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Trip]:
        return await self._fetch(self._select().where(TripRow.user_id == user_id))

    async def find_by_date_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> list[Trip]:
        return await self._fetch(
            self._select()
            .where(TripRow.user_id == user_id)
            .where(TripRow.start_time >= utc(start))
            .where(TripRow.start_time <= utc(end))
        )

    async def find_all(self) -> list[Trip]:
        return await self._fetch(self._select())

    async def update(self, trip: Trip) -> None:
        async with self.database.session() as session:
            row = await session.get(TripRow, trip.id)
            if row is None:
                raise StoreError(f"trips row {trip.id} does not exist")
            apply_trip(row, trip)

    async def delete(self, trip_id: uuid.UUID) -> None:
        async with self.database.session() as session:
            await session.execute(delete(TripRow).where(TripRow.id == trip_id))
