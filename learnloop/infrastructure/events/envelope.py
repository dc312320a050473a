"""Pydantic schema for domain events leaving the process."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from learnloop.domain.common.domain_event import DomainEvent


class EventEnvelope(BaseModel):
    """Wire format of a published domain event."""

    event_id: UUID
    event_type: str = Field(..., min_length=1, description="Event class name, e.g. LevelUp")
    occurred_at: datetime
    channel: str = Field(..., min_length=1, description="Realtime room the event is sent to")
    data: dict[str, Any] = Field(default_factory=dict, description="Event attributes")

    model_config = {"frozen": True}

    @classmethod
    def from_event(cls, event: DomainEvent, channel: str) -> "EventEnvelope":
        data = event.to_dict()
        for key in ("event_id", "occurred_at", "event_type"):
            data.pop(key, None)
        return cls(
            event_id=event.event_id,
            event_type=event.event_type,
            occurred_at=event.occurred_at,
            channel=channel,
            data=data,
        )
