"""Event publisher interface."""

from workforce.infrastructure.events.event_publisher import EventPublisher

__all__ = ["EventPublisher"]
