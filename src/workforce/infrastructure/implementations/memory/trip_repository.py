"""In-memory trip repository for development and tests."""

import copy
import dataclasses
import uuid
from datetime import datetime

from workforce.domain.entities import Trip
from workforce.infrastructure.implementations.memory.store import MemoryTable
from workforce.infrastructure.repositories.trip_repository import TripRepository


class MemoryTripRepository(MemoryTable, TripRepository):
    """Trip storage; lists are newest-first by ``start_time``."""

    table_name = "trips"

    def _detach(self, entity: Trip) -> Trip:
        return dataclasses.replace(copy.deepcopy(entity), user=None)

    def _with_user(self, trip: Trip | None) -> Trip | None:
        if trip is not None:
            trip.user = self._load_user(trip.user_id)
        return trip

    async def create(self, trip: Trip) -> None:
        self._insert(trip)

    async def find_by_id(self, trip_id: uuid.UUID) -> Trip | None:
        return self._with_user(self._first(lambda row: row.id == trip_id))

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[Trip]:
        rows = self._select(
            lambda row: row.user_id == user_id, newest_first_by="start_time"
        )
        return [self._with_user(row) for row in rows]

    async def find_by_date_range(
        self, user_id: uuid.UUID, start: datetime, end: datetime
    ) -> list[Trip]:
        rows = self._select(
            lambda row: row.user_id == user_id and start <= row.start_time <= end,
            newest_first_by="start_time",
        )
        return [self._with_user(row) for row in rows]

    async def find_all(self) -> list[Trip]:
        rows = self._select(newest_first_by="start_time")
        return [self._with_user(row) for row in rows]

    async def update(self, trip: Trip) -> None:
        self._replace(trip)

    async def delete(self, trip_id: uuid.UUID) -> None:
        self._remove(trip_id)
