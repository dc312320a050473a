"""Protocol for publishing drained domain events."""

from collections.abc import Sequence
from typing import Protocol

from learnloop.domain.common.domain_event import DomainEvent


class EventPublisherProtocol(Protocol):
    """Protocol for delivering domain events to interested parties."""

    def publish_all(self, events: Sequence[DomainEvent]) -> None:
        """
        Publish events in the order they were recorded.

        Args:
            events: Events drained from one or more aggregates
        """
        ...


def serialize_events(events: Sequence[DomainEvent]) -> list[dict[str, object]]:
    """Plain ``{"type", "data"}`` dicts for use case results."""
    return [{"type": event.event_type, "data": event.to_dict()} for event in events]
