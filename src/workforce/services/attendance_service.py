"""Attendance service."""

import uuid
from datetime import date, datetime

from loguru import logger

from workforce.domain.entities import Attendance, User
from workforce.domain.exceptions import InvalidArgumentError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import (
    AttendanceRepository,
    UserRepository,
)
from workforce.models.attendance import (
    AttendanceResponse,
    CreateAttendanceRequest,
    UpdateAttendanceRequest,
)
from workforce.services.base import BaseService


class AttendanceService(BaseService):
    """
    Record daily attendance.

    One record per user per day is the expected convention, but ``create``
    does not enforce it: callers that care use ``find_for_day`` first and
    decide whether to reject or merge.
    """

    entity_name = "attendance"

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        publisher: EventPublisher | None = None,
    ):
        super().__init__(publisher)
        self.attendance = attendance
        self.users = users

    async def _load(self, attendance_id: str | uuid.UUID) -> Attendance:
        return await self._load_reference(self.attendance, attendance_id, "attendance")

    async def _load_user(self, user_id: str | uuid.UUID, what: str = "user") -> User:
        return await self._load_reference(self.users, user_id, what)

    @staticmethod
    def _payload(attendance: Attendance) -> dict:
        return {
            "attendance_id": str(attendance.id),
            "user_id": str(attendance.user_id),
            "status": attendance.status.value,
        }

    async def create(self, request: CreateAttendanceRequest) -> AttendanceResponse:
        user = await self._load_user(request.user_id)
        creator = (
            await self._load_user(request.created_by, "creator")
            if request.created_by
            else None
        )

        now = self._now()
        attendance = Attendance(
            id=uuid.uuid4(),
            user_id=user.id,
            check_in=self._utc(request.check_in),
            check_out=self._utc(request.check_out),
            status=request.status,
            created_by=creator.id if creator else None,
            created_at=now,
            updated_at=now,
        )
        with self._store("create attendance"):
            await self.attendance.create(attendance)

        logger.info(f"Recorded attendance {attendance.id} for user {user.id}")
        await self._publish("AttendanceCreated", self._payload(attendance))
        attendance.user = user
        return AttendanceResponse.model_validate(attendance)

    async def get(self, attendance_id: str | uuid.UUID) -> AttendanceResponse:
        return AttendanceResponse.model_validate(await self._load(attendance_id))

    async def list_all(self) -> list[AttendanceResponse]:
        """All records, newest first."""
        with self._store("list attendance"):
            records = await self.attendance.find_all()
        return [AttendanceResponse.model_validate(record) for record in records]

    async def list_for_user(
        self, user_id: str | uuid.UUID
    ) -> list[AttendanceResponse]:
        parsed = self._parse_id(user_id, "user id")
        with self._store("list attendance"):
            records = await self.attendance.find_by_user_id(parsed)
        return [AttendanceResponse.model_validate(record) for record in records]

    async def find_for_day(
        self, user_id: str | uuid.UUID, day: date
    ) -> AttendanceResponse:
        """
        Attendance recorded for a user on a calendar day (UTC).

        Raises:
            NotFoundError: The user has no record that day
        """
        parsed = self._parse_id(user_id, "user id")
        with self._store("look up attendance"):
            record = await self.attendance.find_by_user_and_date(parsed, day)
        return AttendanceResponse.model_validate(self._require(record, "attendance"))

    async def list_for_user_between(
        self, user_id: str | uuid.UUID, start: datetime, end: datetime
    ) -> list[AttendanceResponse]:
        """
        A user's records created within ``[start, end]``, newest first.

        Raises:
            InvalidArgumentError: ``start`` is after ``end``
        """
        parsed = self._parse_id(user_id, "user id")
        start, end = self._utc(start), self._utc(end)
        if start > end:
            raise InvalidArgumentError("start must not be after end")

        with self._store("list attendance"):
            records = await self.attendance.find_by_date_range(parsed, start, end)
        return [AttendanceResponse.model_validate(record) for record in records]

    async def update(
        self, attendance_id: str | uuid.UUID, request: UpdateAttendanceRequest
    ) -> AttendanceResponse:
        """Apply the supplied fields; an explicit ``null`` clears a check time."""
        attendance = await self._load(attendance_id)
        changes = self._changes(request, nullable=("check_in", "check_out"))

        if "user_id" in changes:
            user = await self._load_user(changes["user_id"])
            changes["user_id"] = user.id
            attendance.user = user
        for name in ("check_in", "check_out"):
            if name in changes:
                changes[name] = self._utc(changes[name])

        for name, value in changes.items():
            setattr(attendance, name, value)
        attendance.updated_at = self._now()

        with self._store("update attendance"):
            await self.attendance.update(attendance)

        logger.info(f"Updated attendance {attendance.id}")
        await self._publish("AttendanceUpdated", self._payload(attendance))
        return AttendanceResponse.model_validate(attendance)

    async def delete(self, attendance_id: str | uuid.UUID) -> None:
        attendance = await self._load(attendance_id)

        with self._store("delete attendance"):
            await self.attendance.delete(attendance.id)

        logger.info(f"Deleted attendance {attendance.id}")
        await self._publish(
            "AttendanceDeleted",
            {"attendance_id": str(attendance.id), "user_id": str(attendance.user_id)},
        )
