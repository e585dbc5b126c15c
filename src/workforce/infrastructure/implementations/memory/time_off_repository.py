"""In-memory time-off repository for development and tests."""

import copy
import dataclasses
import uuid
from datetime import date

from workforce.domain.entities import TimeOff, TimeOffStatus
from workforce.infrastructure.implementations.memory.store import MemoryTable
from workforce.infrastructure.repositories.time_off_repository import (
    TimeOffRepository,
)


class MemoryTimeOffRepository(MemoryTable, TimeOffRepository):
    """Time-off storage; lists are newest-first by ``start_date``."""

    table_name = "time_off"

    def _detach(self, entity: TimeOff) -> TimeOff:
        return dataclasses.replace(copy.deepcopy(entity), user=None)

    def _with_user(self, time_off: TimeOff | None) -> TimeOff | None:
        if time_off is not None:
            time_off.user = self._load_user(time_off.user_id)
        return time_off

    def _list(self, predicate=None) -> list[TimeOff]:
        rows = self._select(predicate, newest_first_by="start_date")
        return [self._with_user(row) for row in rows]

    async def create(self, time_off: TimeOff) -> None:
        self._insert(time_off)

    async def find_by_id(self, time_off_id: uuid.UUID) -> TimeOff | None:
        return self._with_user(self._first(lambda row: row.id == time_off_id))

    async def find_by_user_id(self, user_id: uuid.UUID) -> list[TimeOff]:
        return self._list(lambda row: row.user_id == user_id)

    async def find_by_status(self, status: TimeOffStatus) -> list[TimeOff]:
        return self._list(lambda row: row.status == status)

    async def find_by_date_range(self, start: date, end: date) -> list[TimeOff]:
        return self._list(lambda row: row.start_date <= end and row.end_date >= start)

    async def find_all(self) -> list[TimeOff]:
        return self._list()

    async def update(self, time_off: TimeOff) -> None:
        self._replace(time_off)

    async def delete(self, time_off_id: uuid.UUID) -> None:
        self._remove(time_off_id)
