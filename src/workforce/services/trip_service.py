"""Trip service."""

import uuid
from datetime import datetime

from loguru import logger

from workforce.domain.entities import Trip, User
from workforce.domain.exceptions import InvalidArgumentError
from workforce.infrastructure.events import EventPublisher
from workforce.infrastructure.repositories import TripRepository, UserRepository
from workforce.models.trip import CreateTripRequest, TripResponse, UpdateTripRequest
from workforce.services.base import BaseService


class TripService(BaseService):
    """Record business trips. Lists are newest-first by departure time."""

    entity_name = "trip"

    def __init__(
        self,
        trips: TripRepository,
        users: UserRepository,
        publisher: EventPublisher | None = None,
    ):
        super().__init__(publisher)
        self.trips = trips
        self.users = users

    async def _load(self, trip_id: str | uuid.UUID) -> Trip:
        return await self._load_reference(self.trips, trip_id, "trip")

    async def _load_user(self, user_id: str | uuid.UUID, what: str = "user") -> User:
        return await self._load_reference(self.users, user_id, what)

    @staticmethod
    def _payload(trip: Trip) -> dict:
        return {"trip_id": str(trip.id), "user_id": str(trip.user_id)}

    async def create(self, request: CreateTripRequest) -> TripResponse:
        user = await self._load_user(request.user_id)
        creator = (
            await self._load_user(request.created_by, "creator")
            if request.created_by
            else None
        )

        now = self._now()
        trip = Trip(
            id=uuid.uuid4(),
            user_id=user.id,
            start_location=request.start_location,
            end_location=request.end_location,
            start_time=self._utc(request.start_time),
            end_time=self._utc(request.end_time),
            purpose=request.purpose,
            distance_km=request.distance_km,
            created_by=creator.id if creator else None,
            created_at=now,
            updated_at=now,
        )
        with self._store("create trip"):
            await self.trips.create(trip)

        logger.info(f"Created trip {trip.id} for user {user.id}")
        await self._publish("TripCreated", self._payload(trip))
        trip.user = user
        return TripResponse.model_validate(trip)

    async def get(self, trip_id: str | uuid.UUID) -> TripResponse:
        return TripResponse.model_validate(await self._load(trip_id))

    async def list_all(self) -> list[TripResponse]:
        with self._store("list trips"):
            trips = await self.trips.find_all()
        return [TripResponse.model_validate(trip) for trip in trips]

    async def list_for_user(self, user_id: str | uuid.UUID) -> list[TripResponse]:
        parsed = self._parse_id(user_id, "user id")
        with self._store("list trips"):
            trips = await self.trips.find_by_user_id(parsed)
        return [TripResponse.model_validate(trip) for trip in trips]

    async def list_for_user_between(
        self, user_id: str | uuid.UUID, start: datetime, end: datetime
    ) -> list[TripResponse]:
        """A user's trips departing within ``[start, end]``, newest first."""
        parsed = self._parse_id(user_id, "user id")
        start, end = self._utc(start), self._utc(end)
        if start > end:
            raise InvalidArgumentError("start must not be after end")

        with self._store("list trips"):
            trips = await self.trips.find_by_date_range(parsed, start, end)
        return [TripResponse.model_validate(trip) for trip in trips]

    async def update(
        self, trip_id: str | uuid.UUID, request: UpdateTripRequest
    ) -> TripResponse:
        """
        Apply the supplied fields.

        An explicit ``null`` clears ``end_time`` or ``distance_km``.
        """
        trip = await self._load(trip_id)
        changes = self._changes(request, nullable=("end_time", "distance_km"))

        if "user_id" in changes:
            user = await self._load_user(changes["user_id"])
            changes["user_id"] = user.id
            trip.user = user
        for name in ("start_time", "end_time"):
            if name in changes:
                changes[name] = self._utc(changes[name])

        for name, value in changes.items():
            setattr(trip, name, value)
        trip.updated_at = self._now()

        with self._store("update trip"):
            await self.trips.update(trip)

        logger.info(f"Updated trip {trip.id}")
        await self._publish("TripUpdated", self._payload(trip))
        return TripResponse.model_validate(trip)

    async def delete(self, trip_id: str | uuid.UUID) -> None:
        trip = await self._load(trip_id)

        with self._store("delete trip"):
            await self.trips.delete(trip.id)

        logger.info(f"Deleted trip {trip.id}")
        await self._publish("TripDeleted", self._payload(trip))
