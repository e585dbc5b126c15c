"""Unit tests for the Redis Streams event publisher."""

import json
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from workforce.domain.events import Event
from workforce.domain.exceptions import PublishError
from workforce.infrastructure.implementations.redis import RedisEventPublisher


@pytest.fixture
def client():
    redis_client = AsyncMock()
    redis_client.xadd.return_value = "1700000000000-0"
    return redis_client


@pytest.mark.asyncio
async def test_publish_appends_to_prefixed_stream(client):
    # Arrange
    publisher = RedisEventPublisher(
        topic_prefix="workforce", max_stream_length=500, client=client
    )
    event = Event(
        type="RoleCreated",
        payload={"role_id": "r-1", "role_name": "Supervisor"},
        timestamp=datetime(2026, 3, 2, 8, 0, tzinfo=UTC),
    )

    # Act
    await publisher.publish(event)

    # Assert
    client.xadd.assert_awaited_once()
    args, kwargs = client.xadd.call_args
    stream, fields = args
    assert stream == "workforce.RoleCreated"
    assert fields["event_type"] == "RoleCreated"
    assert json.loads(fields["payload"]) == {
        "role_id": "r-1",
        "role_name": "Supervisor",
    }
    assert fields["timestamp"] == "2026-03-02T08:00:00+00:00"
    assert kwargs == {"maxlen": 500, "approximate": True}


@pytest.mark.asyncio
async def test_publish_failure_raises_publish_error(client):
    client.xadd.side_effect = RedisConnectionError("connection refused")
    publisher = RedisEventPublisher(client=client)

    with pytest.raises(PublishError) as exc_info:
        await publisher.publish(Event(type="UserDeleted", payload={"user_id": "u-1"}))

    assert isinstance(exc_info.value.__cause__, RedisConnectionError)


@pytest.mark.asyncio
async def test_close_closes_client(client):
    publisher = RedisEventPublisher(client=client)

    await publisher.close()

    client.aclose.assert_awaited_once()


def test_event_topic_without_prefix():
    event = Event(type="TripCreated", payload={})

    assert event.topic("") == "TripCreated"
    assert event.topic("fleet") == "fleet.TripCreated"
    assert event.to_dict()["type"] == "TripCreated"
