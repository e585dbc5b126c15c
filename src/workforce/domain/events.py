"""Domain events announced after successful state changes."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Event:
    """
    State-change notification handed to the event publisher.

    Attributes:
        type: Event type, e.g. ``RoleCreated``
        payload: Identifier and key fields of the affected entity
        timestamp: When the event was raised (UTC)
    """

    type: str
    payload: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def topic(self, prefix: str) -> str:
        """Channel name for this event under ``prefix`` (``prefix.Type``)."""
        return f"{prefix}.{self.type}" if prefix else self.type

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "payload": self.payload,
            "timestamp": self.timestamp.isoformat(),
        }
