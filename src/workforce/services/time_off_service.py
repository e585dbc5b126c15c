"""Time-off service."""

import uuid
from datetime import date

from loguru import logger

from workforce.domain.entities import TimeOff, TimeOffStatus, User
from workforce.domain.exceptions import InvalidArgumentError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import TimeOffRepository, UserRepository
from workforce.models.time_off import (
    CreateTimeOffRequest,
    TimeOffResponse,
    UpdateTimeOffRequest,
)
from workforce.services.base import BaseService


class TimeOffService(BaseService):
    """
    Manage leave requests.

    The leave period must not end before it starts. Status is not a state
    machine: any status may be set by ``update`` at any time.
    """

    entity_name = "time off"

    def __init__(
        self,
        time_off: TimeOffRepository,
        users: UserRepository,
        publisher: EventPublisher | None = None,
    ):
        super().__init__(publisher)
        self.time_off = time_off
        self.users = users

    async def _load(self, time_off_id: str | uuid.UUID) -> TimeOff:
        return await self._load_reference(self.time_off, time_off_id, "time off")

    async def _load_user(self, user_id: str | uuid.UUID, what: str = "user") -> User:
        return await self._load_reference(self.users, user_id, what)

    @staticmethod
    def _check_period(start_date: date, end_date: date) -> None:
        if start_date > end_date:
            raise InvalidArgumentError("start_date must not be after end_date")

    @staticmethod
    def _payload(time_off: TimeOff) -> dict:
        return {
            "time_off_id": str(time_off.id),
            "user_id": str(time_off.user_id),
            "status": time_off.status.value,
        }

    async def create(self, request: CreateTimeOffRequest) -> TimeOffResponse:
        """
        File a leave request.

        Raises:
            InvalidArgumentError: Malformed id, or start_date after end_date
            NotFoundError: User or creator does not exist
        """
        self._check_period(request.start_date, request.end_date)
        user = await self._load_user(request.user_id)
        creator = (
            await self._load_user(request.created_by, "creator")
            if request.created_by
            else None
        )

        now = self._now()
        time_off = TimeOff(
            id=uuid.uuid4(),
            user_id=user.id,
            leave_type=request.leave_type,
            start_date=request.start_date,
            end_date=request.end_date,
            reason=request.reason,
            status=request.status,
            created_by=creator.id if creator else None,
            created_at=now,
            updated_at=now,
        )
        with self._store("create time off"):
            await self.time_off.create(time_off)

        logger.info(f"Created time off {time_off.id} for user {user.id}")
        await self._publish("TimeOffCreated", self._payload(time_off))
        time_off.user = user
        return TimeOffResponse.model_validate(time_off)

    async def get(self, time_off_id: str | uuid.UUID) -> TimeOffResponse:
        return TimeOffResponse.model_validate(await self._load(time_off_id))

    async def list_all(self) -> list[TimeOffResponse]:
        with self._store("list time off"):
            records = await self.time_off.find_all()
        return [TimeOffResponse.model_validate(record) for record in records]

    async def list_for_user(self, user_id: str | uuid.UUID) -> list[TimeOffResponse]:
        parsed = self._parse_id(user_id, "user id")
        with self._store("list time off"):
            records = await self.time_off.find_by_user_id(parsed)
        return [TimeOffResponse.model_validate(record) for record in records]

    async def list_by_status(
        self, status: TimeOffStatus | str
    ) -> list[TimeOffResponse]:
        try:
            status = TimeOffStatus(status)
        except ValueError as e:
            raise InvalidArgumentError(f"invalid status: {status!r}") from e

        with self._store("list time off"):
            records = await self.time_off.find_by_status(status)
        return [TimeOffResponse.model_validate(record) for record in records]

    async def list_between(self, start: date, end: date) -> list[TimeOffResponse]:
        """Leave overlapping the inclusive period ``[start, end]``."""
        self._check_period(start, end)
        with self._store("list time off"):
            records = await self.time_off.find_by_date_range(start, end)
        return [TimeOffResponse.model_validate(record) for record in records]

    async def update(
        self, time_off_id: str | uuid.UUID, request: UpdateTimeOffRequest
    ) -> TimeOffResponse:
        time_off = await self._load(time_off_id)
        changes = self._changes(request)

        self._check_period(
            changes.get("start_date", time_off.start_date),
            changes.get("end_date", time_off.end_date),
        )
        if "user_id" in changes:
            user = await self._load_user(changes["user_id"])
            changes["user_id"] = user.id
            time_off.user = user

        for name, value in changes.items():
            setattr(time_off, name, value)
        time_off.updated_at = self._now()

        with self._store("update time off"):
            await self.time_off.update(time_off)

        logger.info(f"Updated time off {time_off.id} (status={time_off.status.value})")
        await self._publish("TimeOffUpdated", self._payload(time_off))
        return TimeOffResponse.model_validate(time_off)

    async def delete(self, time_off_id: str | uuid.UUID) -> None:
        time_off = await self._load(time_off_id)

        with self._store("delete time off"):
            await self.time_off.delete(time_off.id)

        logger.info(f"Deleted time off {time_off.id}")
        await self._publish(
            "TimeOffDeleted",
            {"time_off_id": str(time_off.id), "user_id": str(time_off.user_id)},
        )
