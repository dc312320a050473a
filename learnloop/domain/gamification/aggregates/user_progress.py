"""
UserProgress aggregate root.

The learner's persistent gamification state within one learning path:
XP, hearts, streak and position. Owns the heart regeneration and streak
continuity policies.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Self

from learnloop.domain.common.aggregate_root import AggregateRoot
from learnloop.domain.common.calendar import calendar_days_between, ensure_aware, resolve_now
from learnloop.domain.common.domain_event import DomainEvent
from learnloop.domain.common.exceptions import DomainError
from learnloop.domain.common.value_objects import (
    GroupId,
    LessonId,
    PathId,
    UnitId,
    UserId,
    UserProgressId,
)
from learnloop.domain.gamification.events import (
    HeartRefillReason,
    HeartsDepleted,
    HeartsRefilled,
    LevelUp,
    PathCompleted,
    StreakBroken,
    StreakUpdated,
    XPEarned,
)
from learnloop.domain.gamification.value_objects import XP, Hearts, Streak
from learnloop.domain.learning_path.value_objects.accuracy import Accuracy

XP_PER_LEVEL = 100
HEARTS_REFILL_INTERVAL = timedelta(hours=4)
HEARTS_FULL_REFILL_INTERVAL = timedelta(hours=24)


@dataclass(frozen=True)
class UserProgressSnapshot:
    """Immutable, serialization-ready view of a UserProgress."""

    id: int | None
    user_id: str
    path_id: int
    group_id: int | None
    total_xp: int
    level: int
    xp_to_next_level: int
    hearts: int
    streak_count: int
    last_heart_refill: datetime
    last_activity_date: datetime | None
    current_unit_id: int | None
    current_lesson_id: int | None
    started_at: datetime
    completed_at: datetime | None
    time_spent_total: int
    is_completed: bool
    created_at: datetime
    updated_at: datetime
    version: int


@dataclass(eq=False)
class UserProgress(AggregateRoot[UserProgressId]):
    """
    Learner progress through a learning path.

    Business Rules:
    - One progress per (user, path)
    - Level is total XP divided by 100, rounded down
    - One heart regenerates every 4 hours, all of them after 24 hours
    - Streak continues on consecutive calendar days and breaks on gaps
    - Time spent never negative
    - A path is completed at most once

    Every mutator returns the events it recorded; the same events stay
    buffered until ``collect_events`` drains them.
    """

    # Identity
    id: UserProgressId
    user_id: UserId
    path_id: PathId

    # Gamification state
    xp: XP
    hearts: Hearts
    streak: Streak
    last_heart_refill: datetime

    # Timestamps
    started_at: datetime
    created_at: datetime
    updated_at: datetime

    group_id: GroupId | None = None
    last_activity_date: datetime | None = None

    # Position in the path
    current_unit_id: UnitId | None = None
    current_lesson_id: LessonId | None = None

    completed_at: datetime | None = None
    time_spent_total: int = 0

    # Optimistic concurrency token, bumped by the repository on save
    version: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.time_spent_total < 0:
            raise DomainError("Time spent cannot be negative", "INVALID_TIME_SPENT")
        # Stores may hand back timezone-less timestamps; they are UTC.
        self.last_heart_refill = ensure_aware(self.last_heart_refill)
        self.started_at = ensure_aware(self.started_at)
        self.created_at = ensure_aware(self.created_at)
        self.updated_at = ensure_aware(self.updated_at)
        if self.completed_at is not None:
            self.completed_at = ensure_aware(self.completed_at)
        if self.last_activity_date is not None:
            self.last_activity_date = ensure_aware(self.last_activity_date)
        if self.streak.last_activity_date is not None:
            self.streak = Streak.from_count(
                self.streak.count, ensure_aware(self.streak.last_activity_date)
            )

    @classmethod
    def start(
        cls,
        user_id: UserId,
        path_id: PathId,
        group_id: GroupId | None = None,
        now: datetime | None = None,
    ) -> Self:
        """
        Begin a learning path: full hearts, zero XP, fresh streak.

        The new progress has a placeholder id until it is saved.
        """
        now = resolve_now(now)
        return cls(
            id=UserProgressId.generate(),
            user_id=user_id,
            path_id=path_id,
            group_id=group_id,
            xp=XP.zero(),
            hearts=Hearts.full(),
            streak=Streak.start(),
            last_heart_refill=now,
            last_activity_date=now,
            started_at=now,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(cls, snapshot: UserProgressSnapshot) -> Self:
        """Rehydrate progress from a stored snapshot, re-checking invariants."""
        return cls(
            id=(
                UserProgressId(snapshot.id)
                if snapshot.id is not None
                else UserProgressId.generate()
            ),
            user_id=UserId(snapshot.user_id),
            path_id=PathId(snapshot.path_id),
            group_id=GroupId(snapshot.group_id) if snapshot.group_id is not None else None,
            xp=XP.from_amount(snapshot.total_xp),
            hearts=Hearts.create(snapshot.hearts),
            streak=Streak.from_count(snapshot.streak_count, snapshot.last_activity_date),
            last_heart_refill=snapshot.last_heart_refill,
            last_activity_date=snapshot.last_activity_date,
            current_unit_id=(
                UnitId(snapshot.current_unit_id) if snapshot.current_unit_id is not None else None
            ),
            current_lesson_id=(
                LessonId(snapshot.current_lesson_id)
                if snapshot.current_lesson_id is not None
                else None
            ),
            started_at=snapshot.started_at,
            completed_at=snapshot.completed_at,
            time_spent_total=snapshot.time_spent_total,
            created_at=snapshot.created_at,
            updated_at=snapshot.updated_at,
            version=snapshot.version,
        )

    # XP

    def award_xp(self, amount: XP, source: str, now: datetime | None = None) -> list[DomainEvent]:
        """
        Add XP and detect level-ups.

        Args:
            amount: XP to add
            source: What earned the XP (e.g. ``lesson_completion``)
            now: Event time

        Returns:
            XPEarned, followed by LevelUp when a level boundary was crossed
        """
        now = resolve_now(now)
        old_level = self.level
        self.xp = self.xp.add(amount)
        self.updated_at = now

        events: list[DomainEvent] = [
            self._record_event(
                XPEarned(
                    self.user_id,
                    self.path_id,
                    xp_amount=amount.amount,
                    new_total=self.xp.amount,
                    source=source,
                    occurred_at=now,
                )
            )
        ]
        if self.level > old_level:
            events.append(
                self._record_event(
                    LevelUp(self.user_id, self.path_id, new_level=self.level, occurred_at=now)
                )
            )
        return events

    # Hearts

    def refill_hearts(self, now: datetime | None = None) -> list[DomainEvent]:
        """
        Regenerate hearts from the time elapsed since the last refill.

        After 24 hours all hearts come back and the refill clock restarts
        at ``now``. Otherwise one heart returns per full 4 hours; the clock
        advances by the consumed 4-hour ticks only when hearts were added.
        """
        now = resolve_now(now)
        elapsed = now - self.last_heart_refill
        restored = 0
        reason: HeartRefillReason = "time"

        if elapsed >= HEARTS_FULL_REFILL_INTERVAL:
            restored = self.hearts.missing
            self.hearts = Hearts.full()
            self.last_heart_refill = now
            reason = "daily"
        elif elapsed >= HEARTS_REFILL_INTERVAL:
            ticks = elapsed // HEARTS_REFILL_INTERVAL
            restored = min(ticks, self.hearts.missing)
            if restored > 0:
                self.hearts = Hearts.create(self.hearts.remaining + restored)
                self.last_heart_refill = self.last_heart_refill + ticks * HEARTS_REFILL_INTERVAL

        if restored <= 0:
            return []

        self.updated_at = now
        return [
            self._record_event(
                HeartsRefilled(
                    self.user_id,
                    self.path_id,
                    hearts_restored=restored,
                    reason=reason,
                    occurred_at=now,
                )
            )
        ]

    def deduct_heart(
        self, lesson_id: LessonId | None = None, now: datetime | None = None
    ) -> list[DomainEvent]:
        """
        Lose one heart for an incorrect answer.

        Raises:
            DomainError: ``NO_HEARTS`` if no hearts are left
        """
        now = resolve_now(now)
        self.hearts = self.hearts.deduct()
        self.updated_at = now
        if not self.hearts.is_empty:
            return []
        return [
            self._record_event(
                HeartsDepleted(self.user_id, self.path_id, lesson_id=lesson_id, occurred_at=now)
            )
        ]

    def fail_lesson(self, lesson_id: LessonId, now: datetime | None = None) -> list[DomainEvent]:
        """Record a lesson lost to heart depletion."""
        now = resolve_now(now)
        self.hearts = Hearts.empty()
        self.updated_at = now
        return [
            self._record_event(
                HeartsDepleted(self.user_id, self.path_id, lesson_id=lesson_id, occurred_at=now)
            )
        ]

    # Streak

    def update_streak(self, now: datetime | None = None) -> list[DomainEvent]:
        """
        Register today's activity against the streak.

        Same-day activity changes nothing (not even the last activity date).
        Activity the next calendar day extends the streak; a longer gap
        restarts it and records StreakBroken with the previous count.
        """
        now = resolve_now(now)
        old_count = self.streak.count
        events: list[DomainEvent] = []

        if self.last_activity_date is not None:
            days_since_last_activity = calendar_days_between(self.last_activity_date, now)
            if days_since_last_activity == 0:
                return []
            if days_since_last_activity == 1:
                self.streak = self.streak.increment(now)
            else:
                self.streak = Streak.start()
                events.append(
                    self._record_event(
                        StreakBroken(
                            self.user_id,
                            self.path_id,
                            previous_streak=old_count,
                            occurred_at=now,
                        )
                    )
                )
        else:
            self.streak = Streak.start()

        self.last_activity_date = now
        self.updated_at = now

        if self.streak.count != old_count:
            events.append(
                self._record_event(
                    StreakUpdated(
                        self.user_id,
                        self.path_id,
                        new_streak=self.streak.count,
                        occurred_at=now,
                    )
                )
            )
        return events

    def break_streak(self, now: datetime | None = None) -> list[DomainEvent]:
        now = resolve_now(now)
        previous_streak = self.streak.count
        self.streak = Streak.start()
        self.updated_at = now
        if previous_streak == 0:
            return []
        return [
            self._record_event(
                StreakBroken(
                    self.user_id, self.path_id, previous_streak=previous_streak, occurred_at=now
                )
            )
        ]

    # Lessons and position

    def complete_lesson(
        self,
        lesson_id: LessonId,
        accuracy: Accuracy,
        xp_earned: XP,
        hearts_remaining: Hearts,
        now: datetime | None = None,
    ) -> list[DomainEvent]:
        """
        Apply the outcome of a finished lesson.

        Awards XP, takes over the session's final heart count, moves the
        lesson pointer and updates the streak, in that order. Events
        therefore come out as XPEarned, LevelUp, StreakBroken, StreakUpdated
        (the last three only when they apply).
        """
        now = resolve_now(now)
        events = self.award_xp(xp_earned, "lesson_completion", now=now)
        self.hearts = hearts_remaining
        self.current_lesson_id = lesson_id
        events.extend(self.update_streak(now=now))
        return events

    def set_current_position(
        self, unit_id: UnitId, lesson_id: LessonId, now: datetime | None = None
    ) -> None:
        self.current_unit_id = unit_id
        self.current_lesson_id = lesson_id
        self.updated_at = resolve_now(now)

    def complete_path(self, now: datetime | None = None) -> list[DomainEvent]:
        """
        Mark the learning path as completed.

        Raises:
            DomainError: ``PATH_ALREADY_COMPLETED`` on a second call
        """
        if self.completed_at is not None:
            raise DomainError("Learning path is already completed", "PATH_ALREADY_COMPLETED")
        now = resolve_now(now)
        self.completed_at = now
        self.updated_at = now
        return [
            self._record_event(
                PathCompleted(
                    self.user_id,
                    self.path_id,
                    total_xp=self.xp.amount,
                    time_spent_seconds=self.time_spent_total,
                    occurred_at=now,
                )
            )
        ]

    def add_time_spent(self, seconds: int, now: datetime | None = None) -> None:
        """
        Accumulate study time.

        Raises:
            DomainError: ``INVALID_TIME_SPENT`` for negative seconds
        """
        if seconds < 0:
            raise DomainError("Time spent cannot be negative", "INVALID_TIME_SPENT")
        self.time_spent_total += seconds
        self.updated_at = resolve_now(now)

    # Derived state

    @property
    def level(self) -> int:
        return self.xp.amount // XP_PER_LEVEL

    @property
    def xp_to_next_level(self) -> int:
        return (self.level + 1) * XP_PER_LEVEL - self.xp.amount

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    @property
    def is_new(self) -> bool:
        """True until a repository has assigned an id."""
        return self.id.is_placeholder

    def to_snapshot(self) -> UserProgressSnapshot:
        return UserProgressSnapshot(
            id=None if self.is_new else int(self.id),
            user_id=self.user_id.value,
            path_id=int(self.path_id),
            group_id=int(self.group_id) if self.group_id is not None else None,
            total_xp=self.xp.amount,
            level=self.level,
            xp_to_next_level=self.xp_to_next_level,
            hearts=self.hearts.remaining,
            streak_count=self.streak.count,
            last_heart_refill=self.last_heart_refill,
            last_activity_date=self.last_activity_date,
            current_unit_id=int(self.current_unit_id) if self.current_unit_id is not None else None,
            current_lesson_id=(
                int(self.current_lesson_id) if self.current_lesson_id is not None else None
            ),
            started_at=self.started_at,
            completed_at=self.completed_at,
            time_spent_total=self.time_spent_total,
            is_completed=self.is_completed,
            created_at=self.created_at,
            updated_at=self.updated_at,
            version=self.version,
        )
