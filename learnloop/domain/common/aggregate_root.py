"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All mutations go through the
root's methods, and all invariants are enforced there.

Example:
    @dataclass(eq=False)
    class UserProgress(AggregateRoot[UserProgressId]):
        id: UserProgressId
        xp: XP

        def award_xp(self, amount: XP, source: str) -> list[DomainEvent]:
            self.xp = self.xp.add(amount)
            return [self._record_event(XPEarned(...))]
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .domain_event import DomainEvent
from .entity import Entity, IdType

EventT = TypeVar("EventT", bound=DomainEvent)


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related objects)
    - Responsible for maintaining invariants
    - The only object referenced from outside the aggregate
    - An ordered outbox of domain events

    Mutators return the events they recorded. The same events stay
    buffered on the aggregate until the use case drains them with
    ``collect_events`` after the aggregate has been persisted.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: EventT) -> EventT:
        """Append an event to the outbox and hand it back to the caller."""
        self._events.append(event)
        return event

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        Called by the application layer after persisting the aggregate.
        """
        events = self._events.copy()
        self._events.clear()
        return events

    def clear_events(self) -> None:
        """Discard recorded events without publishing them."""
        self._events.clear()

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
