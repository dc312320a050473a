"""Analytics publisher: every domain event becomes a structured log line."""

from collections.abc import Sequence

import structlog

from learnloop.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)


class LoggingEventPublisher:
    """Publishes domain events to the structured log."""

    def publish_all(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            data = event.to_dict()
            for key in ("event_id", "occurred_at", "event_type"):
                data.pop(key, None)
            logger.info(
                "domain_event",
                event_type=event.event_type,
                event_id=str(event.event_id),
                occurred_at=event.occurred_at.isoformat(),
                data=data,
            )
