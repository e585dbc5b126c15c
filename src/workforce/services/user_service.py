"""User service."""

import uuid

from loguru import logger

from workforce.domain.entities import Role, User
from workforce.domain.exceptions import ConflictError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import RoleRepository, UserRepository
from workforce.models.user import CreateUserRequest, UpdateUserRequest, UserResponse
from workforce.services.base import BaseService


class UserService(BaseService):
    """
    Manage workforce users.

    Employee id and e-mail are each unique across users. A supplied role or
    creator must exist.
    """

    entity_name = "user"

    def __init__(
        self,
        users: UserRepository,
        roles: RoleRepository,
        publisher: EventPublisher | None = None,
    ):
        super().__init__(publisher)
        self.users = users
        self.roles = roles

    async def _load(self, user_id: str | uuid.UUID, what: str = "user") -> User:
        return await self._load_reference(self.users, user_id, what)

    async def _load_role(self, role_id: str | uuid.UUID) -> Role:
        return await self._load_reference(self.roles, role_id, "role")

    async def _ensure_unique(
        self,
        employee_id: str | None,
        email: str | None,
        user_id: uuid.UUID | None = None,
    ) -> None:
        with self._store("look up user"):
            if employee_id is not None:
                existing = await self.users.find_by_employee_id(employee_id)
                if existing is not None and existing.id != user_id:
                    raise ConflictError(
                        f"user with employee id '{employee_id}' already exists"
                    )
            if email is not None:
                existing = await self.users.find_by_email(email)
                if existing is not None and existing.id != user_id:
                    raise ConflictError(f"user with email '{email}' already exists")

    @staticmethod
    def _payload(user: User) -> dict:
        return {
            "user_id": str(user.id),
            "employee_id": user.employee_id,
            "email": user.email,
        }

    async def create(self, request: CreateUserRequest) -> UserResponse:
        """
        Register a user.

        Raises:
            InvalidArgumentError: Malformed role or creator id
            NotFoundError: Role or creator does not exist
            ConflictError: Employee id or e-mail already in use
        """
        role = await self._load_role(request.role_id) if request.role_id else None
        creator = (
            await self._load(request.created_by, "creator")
            if request.created_by
            else None
        )
        await self._ensure_unique(request.employee_id, request.email)

        now = self._now()
        user = User(
            id=uuid.uuid4(),
            first_name=request.first_name,
            last_name=request.last_name,
            employee_id=request.employee_id,
            email=request.email,
            phone=request.phone,
            status=request.status,
            profile=request.profile,
            role_id=role.id if role else None,
            created_by=creator.id if creator else None,
            created_at=now,
            updated_at=now,
        )
        with self._store("create user"):
            await self.users.create(user)

        logger.info(f"Created user {user.id} ({user.employee_id})")
        await self._publish("UserCreated", self._payload(user))
        user.role = role
        return UserResponse.model_validate(user)

    async def get(self, user_id: str | uuid.UUID) -> UserResponse:
        return UserResponse.model_validate(await self._load(user_id))

    async def get_by_email(self, email: str) -> UserResponse:
        with self._store("look up user"):
            user = await self.users.find_by_email(email)
        return UserResponse.model_validate(self._require(user, "user"))

    async def get_by_employee_id(self, employee_id: str) -> UserResponse:
        with self._store("look up user"):
            user = await self.users.find_by_employee_id(employee_id)
        return UserResponse.model_validate(self._require(user, "user"))

    async def list_all(self) -> list[UserResponse]:
        with self._store("list users"):
            users = await self.users.find_all()
        return [UserResponse.model_validate(user) for user in users]

    async def list_by_role(self, role_id: str | uuid.UUID) -> list[UserResponse]:
        parsed = self._parse_id(role_id, "role id")
        with self._store("list users"):
            users = await self.users.find_by_role_id(parsed)
        return [UserResponse.model_validate(user) for user in users]

    async def update(
        self, user_id: str | uuid.UUID, request: UpdateUserRequest
    ) -> UserResponse:
        user = await self._load(user_id)
        changes = self._changes(request, nullable=("role_id",))

        if "role_id" in changes:
            role = (
                await self._load_role(changes["role_id"])
                if changes["role_id"]
                else None
            )
            changes["role_id"] = role.id if role else None
            user.role = role

        employee_id = changes.get("employee_id")
        email = changes.get("email")
        await self._ensure_unique(
            employee_id if employee_id != user.employee_id else None,
            email if email != user.email else None,
            user.id,
        )

        for name, value in changes.items():
            setattr(user, name, value)
        user.updated_at = self._now()

        with self._store("update user"):
            await self.users.update(user)

        logger.info(f"Updated user {user.id}")
        await self._publish("UserUpdated", self._payload(user))
        return UserResponse.model_validate(user)

    async def delete(self, user_id: str | uuid.UUID) -> None:
        user = await self._load(user_id)

        with self._store("delete user"):
            await self.users.delete(user.id)

        logger.info(f"Deleted user {user.id}")
        await self._publish("UserDeleted", {"user_id": str(user.id)})
