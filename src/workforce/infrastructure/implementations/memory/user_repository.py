"""In-memory user repository for development and tests."""

import copy
import dataclasses
import uuid

from workforce.domain.entities import User
from workforce.infrastructure.implementations.memory.store import MemoryTable
from workforce.infrastructure.repositories.user_repository import UserRepository


class MemoryUserRepository(MemoryTable, UserRepository):
    """
    User storage backed by a shared MemoryStore.

    Employee id and e-mail are unique. Finders attach the user's role.
    """

    table_name = "users"
    unique_fields = ("employee_id", "email")

    def _detach(self, entity: User) -> User:
        return dataclasses.replace(copy.deepcopy(entity), role=None)

    def _with_role(self, user: User | None) -> User | None:
        if user is not None:
            user.role = self._load_role(user.role_id)
        return user

    async def create(self, user: User) -> None:
        self._insert(user)

    async def find_by_id(self, user_id: uuid.UUID) -> User | None:
        return self._with_role(self._first(lambda row: row.id == user_id))

    async def find_by_email(self, email: str) -> User | None:
        return self._with_role(self._first(lambda row: row.email == email))

    async def find_by_employee_id(self, employee_id: str) -> User | None:
        return self._with_role(
            self._first(lambda row: row.employee_id == employee_id)
        )

    async def find_all(self) -> list[User]:
        return [self._with_role(row) for row in self._select()]

    async def find_by_role_id(self, role_id: uuid.UUID) -> list[User]:
        return [
            self._with_role(row)
            for row in self._select(lambda row: row.role_id == role_id)
        ]

    async def update(self, user: User) -> None:
        self._replace(user)

    async def delete(self, user_id: uuid.UUID) -> None:
        self._remove(user_id)
