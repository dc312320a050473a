from .broadcast_publisher import BroadcasterProtocol, BroadcastEventPublisher, channel_for
from .composite_publisher import CompositeEventPublisher
from .envelope import EventEnvelope
from .logging_publisher import LoggingEventPublisher

__all__ = [
    "BroadcastEventPublisher",
    "BroadcasterProtocol",
    "CompositeEventPublisher",
    "EventEnvelope",
    "LoggingEventPublisher",
    "channel_for",
]
