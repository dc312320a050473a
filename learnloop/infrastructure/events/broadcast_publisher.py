"""Realtime publisher: hands domain events to a socket broadcaster."""

from collections.abc import Sequence
from typing import Any, Protocol

import structlog

from learnloop.domain.common.domain_event import DomainEvent
from learnloop.infrastructure.events.envelope import EventEnvelope

logger = structlog.get_logger(__name__)

DEFAULT_CHANNEL = "broadcast"


class BroadcasterProtocol(Protocol):
    """Anything that can push a JSON payload into a realtime room."""

    def __call__(self, channel: str, payload: dict[str, Any]) -> None:
        """
        Send a payload to every client in a room.

        Args:
            channel: Room name, e.g. ``user:abc``
            payload: JSON-serializable event envelope
        """
        ...


def channel_for(event: DomainEvent) -> str:
    """Room an event belongs to: the learner's room when the event names one."""
    user_id = getattr(event, "user_id", None)
    if user_id is None:
        return DEFAULT_CHANNEL
    return f"user:{user_id}"


class BroadcastEventPublisher:
    """Publishes domain events as EventEnvelope payloads through a broadcaster."""

    def __init__(self, broadcaster: BroadcasterProtocol) -> None:
        self.broadcaster = broadcaster

    def publish_all(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            envelope = EventEnvelope.from_event(event, channel_for(event))
            self.broadcaster(envelope.channel, envelope.model_dump(mode="json"))
            logger.debug(
                "broadcast_domain_event",
                event_type=envelope.event_type,
                channel=envelope.channel,
            )
