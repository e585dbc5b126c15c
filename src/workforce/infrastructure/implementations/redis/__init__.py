"""Redis infrastructure implementations."""

from workforce.infrastructure.implementations.redis.event_publisher import (
    RedisEventPublisher,
)

__all__ = ["RedisEventPublisher"]
