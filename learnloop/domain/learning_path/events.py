"""Domain events raised by the LessonSession aggregate."""

from dataclasses import dataclass

from learnloop.domain.common.domain_event import DomainEvent
from learnloop.domain.common.value_objects import LessonId, UserId
from learnloop.domain.learning_path.value_objects import Accuracy


@dataclass(frozen=True)
class LessonEvent(DomainEvent):
    """Base for every event about one learner's attempt at one lesson."""

    lesson_id: LessonId
    user_id: UserId


@dataclass(frozen=True)
class LessonStarted(LessonEvent):
    flashcard_count: int


@dataclass(frozen=True)
class CardAdvanced(LessonEvent):
    current_index: int
    total_cards: int


@dataclass(frozen=True)
class LessonCompleted(LessonEvent):
    accuracy: Accuracy
    hearts_remaining: int
    cards_reviewed: int


@dataclass(frozen=True)
class LessonFailed(LessonEvent):
    accuracy: Accuracy
    cards_reviewed: int


@dataclass(frozen=True)
class HeartLost(LessonEvent):
    hearts_remaining: int


@dataclass(frozen=True)
class LessonAbandoned(LessonEvent):
    cards_reviewed: int
    total_cards: int
    accuracy: Accuracy
    reason: str | None = None
