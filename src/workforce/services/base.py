"""
Base class for the workforce domain services.

A service validates a request, mutates state through its repository ports
and then announces the change through the event publisher. Publishing is
best-effort: a missing publisher is a no-op and a failing one is logged and
ignored, so a persisted change is never reported as failed.
"""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from loguru import logger
from pydantic import BaseModel

from workforce.domain.events import Event
from workforce.domain.exceptions import (
    ConflictError,
    ConstraintViolationError,
    InvalidArgumentError,
    NotFoundError,
    PersistenceError,
    WorkforceError,
)
from workforce.infrastructure.events import EventPublisher


class BaseService:
    """
    Shared behaviour of the entity services.

    Attributes:
        entity_name: Human-readable entity name used in error messages
        publisher: Event publisher, or None to disable events
    """

    entity_name: str = "entity"

    def __init__(self, publisher: EventPublisher | None = None):
        self.publisher = publisher

    @staticmethod
    def _now() -> datetime:
        return datetime.now(UTC)

    @staticmethod
    def _utc(value: datetime | None) -> datetime | None:
        """Normalise a caller-supplied timestamp to UTC (naive means UTC)."""
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @staticmethod
    def _parse_id(value: str | uuid.UUID, field: str = "id") -> uuid.UUID:
        """
        Parse an identifier supplied by a caller.

        Raises:
            InvalidArgumentError: If ``value`` is not a UUID
        """
        if isinstance(value, uuid.UUID):
            return value
        try:
            return uuid.UUID(str(value))
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"invalid {field}: {value!r}") from e

    @staticmethod
    def _changes(
        request: BaseModel, nullable: tuple[str, ...] = ()
    ) -> dict[str, Any]:
        """
        Fields explicitly supplied in an update request.

        An explicit ``None`` is kept only for fields listed in ``nullable``;
        for every other field it is treated as absent.
        """
        return {
            name: value
            for name, value in request.model_dump(exclude_unset=True).items()
            if value is not None or name in nullable
        }

    @staticmethod
    def _require(entity: Any, what: str) -> Any:
        if entity is None:
            raise NotFoundError(f"{what} not found")
        return entity

    async def _load_reference(
        self, repository: Any, entity_id: str | uuid.UUID, what: str
    ) -> Any:
        """
        Load a referenced entity through ``repository.find_by_id``.

        Raises:
            InvalidArgumentError: Malformed id
            NotFoundError: No entity with that id
        """
        parsed = self._parse_id(entity_id, f"{what} id")
        with self._store(f"load {what}"):
            entity = await repository.find_by_id(parsed)
        return self._require(entity, what)

    @contextmanager
    def _store(self, action: str) -> Iterator[None]:
        """
        Translate repository failures raised inside the block.

        A constraint violation becomes ``ConflictError``; any other failure
        becomes an opaque ``PersistenceError`` with the cause chained.
        """
        try:
            yield
        except WorkforceError:
            raise
        except ConstraintViolationError as e:
            logger.info(f"Constraint violation while trying to {action}: {e}")
            raise ConflictError(
                f"{self.entity_name} conflicts with an existing record"
            ) from e
        except Exception as e:
            logger.error(f"Failed to {action}: {type(e).__name__}: {e}")
            raise PersistenceError(f"failed to {action}") from e

    async def _publish(self, event_type: str, payload: dict[str, Any]) -> None:
        if self.publisher is None:
            return

        event = Event(type=event_type, payload=payload)
        try:
            await self.publisher.publish(event)
        except Exception as e:
            logger.warning(f"Failed to publish {event_type}: {e}")
