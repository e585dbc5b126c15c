"""
Redis Streams implementation of the event publisher.

Each event is appended (XADD) to the stream ``{topic_prefix}.{event.type}``
with the fields:
- event_type: Event type name
- payload: JSON-encoded event payload
- timestamp: ISO 8601 event timestamp

Streams are capped approximately at ``max_stream_length`` entries. Delivery is
at-most-effort: a failed XADD raises PublishError and is not retried.
"""

import json

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from workforce.core.logging import logger
from workforce.domain.events import Event
from workforce.domain.exceptions import PublishError
from workforce.infrastructure.events.event_publisher import EventPublisher


class RedisEventPublisher(EventPublisher):
    """
    Publishes domain events to Redis Streams.

    The connection is opened lazily by the redis client on first use, so a
    broker outage at startup does not prevent the service from running.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        topic_prefix: str = "workforce",
        max_stream_length: int = 10_000,
        client: aioredis.Redis | None = None,
    ):
        """
        Initialize Redis event publisher.

        Args:
            redis_url: Redis connection URL
            topic_prefix: Prefix for stream names
            max_stream_length: Approximate cap for each stream
            client: Pre-built redis client (overrides redis_url)
        """
        super().__init__(topic_prefix=topic_prefix)
        self.max_stream_length = max_stream_length
        self._redis = client or aioredis.from_url(redis_url, decode_responses=True)

        logger.info(
            f"Initialized RedisEventPublisher with url={redis_url.split('@')[-1]}, "
            f"prefix={topic_prefix}"
        )

    async def publish(self, event: Event) -> None:
        """Append an event to its Redis stream."""
        stream = event.topic(self.topic_prefix)
        fields = {
            "event_type": event.type,
            "payload": json.dumps(event.payload, default=str),
            "timestamp": event.timestamp.isoformat(),
        }

        try:
            message_id = await self._redis.xadd(
                stream, fields, maxlen=self.max_stream_length, approximate=True
            )
        except RedisError as e:
            logger.error(f"Failed to publish event {event.type} to {stream}: {e}")
            raise PublishError(f"failed to publish {event.type}") from e

        logger.info(
            f"Published event: type={event.type}, stream={stream}, id={message_id}"
        )

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()
