"""
Shared in-memory tables for the memory provider.

All memory repositories created by one factory share a single MemoryStore so
that finders can resolve relations across entity types (a user's role, an
attendance record's user). Rows are stored without their relation fields and
copied on every read and write, so callers never hold a live reference to a
stored row.
"""

import copy
import uuid
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from workforce.domain.entities import (
    Attendance,
    Crew,
    CrewMember,
    Equipment,
    Permission,
    Role,
    TimeOff,
    Trip,
    User,
)
from workforce.domain.exceptions import ConstraintViolationError, StoreError

T = TypeVar("T")


class MemoryStore:
    """
    Process-local tables keyed by entity id, in insertion order.

    Unique columns mirror the relational schema: role name, user employee id
    and e-mail, equipment serial number.
    """

    def __init__(self) -> None:
        self.roles: dict[uuid.UUID, Role] = {}
        self.permissions: dict[uuid.UUID, Permission] = {}
        self.users: dict[uuid.UUID, User] = {}
        self.crews: dict[uuid.UUID, Crew] = {}
        self.crew_members: dict[uuid.UUID, CrewMember] = {}
        self.equipment: dict[uuid.UUID, Equipment] = {}
        self.attendance: dict[uuid.UUID, Attendance] = {}
        self.time_off: dict[uuid.UUID, TimeOff] = {}
        self.trips: dict[uuid.UUID, Trip] = {}

    def clear(self) -> None:
        """Drop every row from every table."""
        for table in (
            self.roles,
            self.permissions,
            self.users,
            self.crews,
            self.crew_members,
            self.equipment,
            self.attendance,
            self.time_off,
            self.trips,
        ):
            table.clear()


class MemoryTable:
    """Row operations over one MemoryStore table, shared by memory repositories."""

    table_name: str = ""
    unique_fields: tuple[str, ...] = ()

    def __init__(self, store: MemoryStore):
        self.store = store

    @property
    def rows(self) -> dict[uuid.UUID, Any]:
        return getattr(self.store, self.table_name)

    def _detach(self, entity: Any) -> Any:
        """Return a stored copy of ``entity`` without relation fields."""
        return copy.deepcopy(entity)

    def _check_unique(self, entity: Any) -> None:
        for field_name in self.unique_fields:
            value = getattr(entity, field_name)
            if value is None:
                continue
            for row in self.rows.values():
                if row.id != entity.id and getattr(row, field_name) == value:
                    raise ConstraintViolationError(
                        f"duplicate value for {self.table_name}.{field_name}"
                    )

    def _insert(self, entity: Any) -> None:
        if entity.id in self.rows:
            raise ConstraintViolationError(
                f"duplicate primary key for {self.table_name}"
            )
        self._check_unique(entity)
        self.rows[entity.id] = self._detach(entity)

    def _replace(self, entity: Any) -> None:
        if entity.id not in self.rows:
            raise StoreError(f"{self.table_name} row {entity.id} does not exist")
        self._check_unique(entity)
        self.rows[entity.id] = self._detach(entity)

    def _remove(self, entity_id: uuid.UUID) -> None:
        self.rows.pop(entity_id, None)

    def _first(self, predicate: Callable[[Any], bool]) -> Any | None:
        for row in self.rows.values():
            if predicate(row):
                return copy.deepcopy(row)
        return None

    def _select(
        self,
        predicate: Callable[[Any], bool] | None = None,
        newest_first_by: str | None = None,
    ) -> list[Any]:
        rows: Iterable[Any] = self.rows.values()
        if predicate is not None:
            rows = [row for row in rows if predicate(row)]
        result = [copy.deepcopy(row) for row in rows]
        if newest_first_by:
            result.sort(key=lambda row: getattr(row, newest_first_by), reverse=True)
        return result

    def _load_role(self, role_id: uuid.UUID | None) -> Role | None:
        if role_id is None:
            return None
        role = self.store.roles.get(role_id)
        return copy.deepcopy(role) if role else None

    def _load_user(
        self, user_id: uuid.UUID | None, with_role: bool = False
    ) -> User | None:
        if user_id is None:
            return None
        user = self.store.users.get(user_id)
        if user is None:
            return None
        user = copy.deepcopy(user)
        if with_role:
            user.role = self._load_role(user.role_id)
        return user
