"""Fan-out publisher."""

from collections.abc import Sequence

from learnloop.application.common.event_publisher import EventPublisherProtocol
from learnloop.domain.common.domain_event import DomainEvent


class CompositeEventPublisher:
    """Publishes the same events to several publishers, in registration order."""

    def __init__(self, *publishers: EventPublisherProtocol) -> None:
        self.publishers = publishers

    def publish_all(self, events: Sequence[DomainEvent]) -> None:
        if not events:
            return
        for publisher in self.publishers:
            publisher.publish_all(events)
