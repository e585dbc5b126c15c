"""
In-memory event publisher for local development and tests.

Events are logged and kept in an in-process list; nothing leaves the process.
"""

from loguru import logger

from workforce.domain.events import Event
from workforce.infrastructure.events.event_publisher import EventPublisher


class MemoryEventPublisher(EventPublisher):
    """Records published events in ``self.events``, oldest first."""

    def __init__(self, topic_prefix: str = "workforce"):
        super().__init__(topic_prefix=topic_prefix)
        self.events: list[Event] = []

    async def publish(self, event: Event) -> None:
        self.events.append(event)
        logger.info(
            f"Published event: type={event.type}, topic={event.topic(self.topic_prefix)}"
        )

    def of_type(self, event_type: str) -> list[Event]:
        """Return the recorded events of one type."""
        return [event for event in self.events if event.type == event_type]
