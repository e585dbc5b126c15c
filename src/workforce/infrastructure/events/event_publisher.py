"""
Abstract interface for announcing domain events.

Publishing is at-most-effort: implementations report failures by raising
PublishError, and the domain services log and discard those failures. There
is no outbox and no redelivery.
"""

from abc import ABC, abstractmethod

from workforce.domain.events import Event


class EventPublisher(ABC):
    """
    Abstract interface for event publishing.

    Implementations route each event to a channel named
    ``{topic_prefix}.{event.type}``.
    """

    def __init__(self, topic_prefix: str = "workforce"):
        """
        Initialize event publisher.

        Args:
            topic_prefix: Prefix prepended to every event type to build the
                          channel name
        """
        self.topic_prefix = topic_prefix

    @abstractmethod
    async def publish(self, event: Event) -> None:
        """
        Publish a single event.

        Args:
            event: Event to announce

        Raises:
            PublishError: If the event could not be delivered
        """
        pass

    async def close(self) -> None:
        """Release any connection held by the publisher."""
        return None
