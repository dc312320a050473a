from .event_publisher import EventPublisherProtocol, serialize_events

__all__ = ["EventPublisherProtocol", "serialize_events"]
