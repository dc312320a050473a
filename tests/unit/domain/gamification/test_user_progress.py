"""Tests for the UserProgress aggregate."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from learnloop.domain.common.exceptions import DomainError
from learnloop.domain.common.value_objects import (
    LessonId,
    PathId,
    UnitId,
    UserId,
    UserProgressId,
)
from learnloop.domain.gamification.aggregates import UserProgress
from learnloop.domain.gamification.events import (
    HeartsDepleted,
    HeartsRefilled,
    LevelUp,
    PathCompleted,
    StreakBroken,
    StreakUpdated,
    XPEarned,
)
from learnloop.domain.gamification.value_objects import XP, Hearts, Streak
from learnloop.domain.learning_path.value_objects import Accuracy

START = datetime(2024, 3, 15, 9, 0, tzinfo=UTC)


def _make_progress(**overrides: object) -> UserProgress:
    progress = UserProgress.start(UserId("learner-1"), PathId(1), now=START)
    for name, value in overrides.items():
        setattr(progress, name, value)
    return progress


class TestStart:
    def test_starts_with_full_hearts_and_no_xp(self) -> None:
        progress = _make_progress()

        assert progress.hearts == Hearts.full()
        assert progress.xp == XP.zero()
        assert progress.streak.count == 0
        assert progress.level == 0
        assert progress.last_heart_refill == START
        assert progress.is_new
        assert progress.pending_events == []

    def test_negative_time_spent_is_rejected(self) -> None:
        with pytest.raises(DomainError, match="negative"):
            _make_progress().add_time_spent(-1)


class TestAwardXP:
    def test_crossing_a_level_boundary_emits_level_up(self) -> None:
        progress = _make_progress(xp=XP(95))

        events = progress.award_xp(XP(10), "lesson_completion", now=START)

        assert progress.xp.amount == 105
        assert [type(e) for e in events] == [XPEarned, LevelUp]
        assert events[0].new_total == 105
        assert events[1].new_level == 1

    def test_staying_within_a_level_emits_only_xp_earned(self) -> None:
        progress = _make_progress(xp=XP(95))

        events = progress.award_xp(XP(4), "review", now=START)

        assert [type(e) for e in events] == [XPEarned]
        assert progress.level == 0
        assert progress.xp_to_next_level == 1

    def test_events_stay_buffered_until_collected(self) -> None:
        progress = _make_progress(xp=XP(95))
        progress.award_xp(XP(10), "lesson_completion", now=START)

        assert len(progress.collect_events()) == 2
        assert progress.collect_events() == []


class TestRefillHearts:
    def test_two_ticks_restore_two_hearts_and_advance_clock(self) -> None:
        progress = _make_progress(hearts=Hearts.create(2))

        events = progress.refill_hearts(now=START + timedelta(hours=9))

        assert progress.hearts.remaining == 4
        assert progress.last_heart_refill == START + timedelta(hours=8)
        assert len(events) == 1
        assert isinstance(events[0], HeartsRefilled)
        assert events[0].hearts_restored == 2
        assert events[0].reason == "time"

    def test_ticks_are_capped_at_the_maximum(self) -> None:
        progress = _make_progress(hearts=Hearts.create(4))

        progress.refill_hearts(now=START + timedelta(hours=20))

        assert progress.hearts.is_full

    def test_a_day_restores_everything_and_restarts_clock(self) -> None:
        progress = _make_progress(hearts=Hearts.empty())
        now = START + timedelta(hours=30)

        events = progress.refill_hearts(now=now)

        assert progress.hearts.is_full
        assert progress.last_heart_refill == now
        assert events[0].hearts_restored == 5
        assert events[0].reason == "daily"

    def test_less_than_one_tick_is_a_no_op(self) -> None:
        progress = _make_progress(hearts=Hearts.create(1))

        events = progress.refill_hearts(now=START + timedelta(hours=3, minutes=59))

        assert events == []
        assert progress.hearts.remaining == 1
        assert progress.last_heart_refill == START

    def test_full_hearts_do_not_move_the_clock(self) -> None:
        progress = _make_progress()

        assert progress.refill_hearts(now=START + timedelta(hours=5)) == []
        assert progress.last_heart_refill == START


class TestDeductHeart:
    def test_losing_the_last_heart_emits_hearts_depleted(self) -> None:
        progress = _make_progress(hearts=Hearts.create(1))

        events = progress.deduct_heart(LessonId(7), now=START)

        assert progress.hearts.is_empty
        assert len(events) == 1
        assert isinstance(events[0], HeartsDepleted)
        assert events[0].lesson_id == LessonId(7)

    def test_deducting_with_hearts_left_is_silent(self) -> None:
        progress = _make_progress()

        assert progress.deduct_heart(now=START) == []
        assert progress.hearts.remaining == 4

    def test_deducting_from_empty_fails(self) -> None:
        progress = _make_progress(hearts=Hearts.empty())

        with pytest.raises(DomainError) as exc_info:
            progress.deduct_heart(now=START)
        assert exc_info.value.code == "NO_HEARTS"

    def test_fail_lesson_empties_hearts(self) -> None:
        progress = _make_progress(hearts=Hearts.create(3))

        events = progress.fail_lesson(LessonId(2), now=START)

        assert progress.hearts.is_empty
        assert isinstance(events[0], HeartsDepleted)


class TestUpdateStreak:
    def test_same_day_changes_nothing(self) -> None:
        progress = _make_progress()

        assert progress.update_streak(now=START + timedelta(hours=5)) == []
        assert progress.last_activity_date == START

    def test_next_day_extends_streak(self) -> None:
        progress = _make_progress(streak=Streak.from_count(3, START))
        now = START + timedelta(days=1)

        events = progress.update_streak(now=now)

        assert progress.streak.count == 4
        assert progress.last_activity_date == now
        assert [type(e) for e in events] == [StreakUpdated]
        assert events[0].new_streak == 4

    def test_gap_breaks_streak(self) -> None:
        progress = _make_progress(streak=Streak.from_count(5, START))

        events = progress.update_streak(now=START + timedelta(days=3))

        assert progress.streak.count == 0
        assert [type(e) for e in events] == [StreakBroken, StreakUpdated]
        assert events[0].previous_streak == 5
        assert events[1].new_streak == 0

    def test_first_activity_starts_fresh_without_breaking(self) -> None:
        progress = _make_progress(last_activity_date=None, streak=Streak.from_count(2, None))
        now = START + timedelta(days=4)

        events = progress.update_streak(now=now)

        assert [type(e) for e in events] == [StreakUpdated]
        assert events[0].new_streak == 0
        assert progress.streak.count == 0
        assert progress.last_activity_date == now

    def test_first_activity_on_a_fresh_streak_is_silent(self) -> None:
        progress = _make_progress(last_activity_date=None)
        now = START + timedelta(days=4)

        assert progress.update_streak(now=now) == []
        assert progress.last_activity_date == now

    def test_break_streak_without_a_streak_is_silent(self) -> None:
        progress = _make_progress()

        assert progress.break_streak(now=START) == []


class TestCompleteLesson:
    def test_applies_xp_hearts_position_and_streak_in_order(self) -> None:
        progress = _make_progress(xp=XP(90), streak=Streak.from_count(1, START))
        now = START + timedelta(days=1)

        events = progress.complete_lesson(
            LessonId(3), Accuracy.from_ratio(4, 4), XP(35), Hearts.create(3), now=now
        )

        assert [type(e) for e in events] == [XPEarned, LevelUp, StreakUpdated]
        assert progress.xp.amount == 125
        assert progress.hearts.remaining == 3
        assert progress.current_lesson_id == LessonId(3)
        assert progress.streak.count == 2


class TestCompletePath:
    def test_completes_once(self) -> None:
        progress = _make_progress(xp=XP(240))
        progress.add_time_spent(600, now=START)

        events = progress.complete_path(now=START)

        assert progress.is_completed
        assert isinstance(events[0], PathCompleted)
        assert events[0].total_xp == 240
        assert events[0].time_spent_seconds == 600

        with pytest.raises(DomainError) as exc_info:
            progress.complete_path(now=START)
        assert exc_info.value.code == "PATH_ALREADY_COMPLETED"


class TestSnapshot:
    def test_reconstitute_round_trips_state(self) -> None:
        progress = _make_progress(
            id=UserProgressId(12), xp=XP(150), hearts=Hearts.create(2), version=3
        )

        restored = UserProgress.reconstitute(progress.to_snapshot())

        assert restored.id == UserProgressId(12)
        assert restored.xp == XP(150)
        assert restored.level == 1
        assert restored.hearts == Hearts.create(2)
        assert restored.version == 3
        assert not restored.is_new

    def test_timezone_less_timestamps_are_read_as_utc(self) -> None:
        naive_start = START.replace(tzinfo=None)
        snapshot = replace(
            _make_progress(hearts=Hearts.create(2)).to_snapshot(),
            last_heart_refill=naive_start,
            last_activity_date=naive_start,
            started_at=naive_start,
            created_at=naive_start,
            updated_at=naive_start,
        )

        restored = UserProgress.reconstitute(snapshot)
        events = restored.refill_hearts(now=START + timedelta(hours=9))

        assert restored.started_at == START
        assert restored.last_activity_date == START
        assert restored.hearts.remaining == 4
        assert [type(e) for e in events] == [HeartsRefilled]

    def test_timezone_less_now_is_read_as_utc(self) -> None:
        progress = _make_progress(hearts=Hearts.create(2))

        progress.refill_hearts(now=(START + timedelta(hours=4)).replace(tzinfo=None))

        assert progress.hearts.remaining == 3
        assert progress.last_heart_refill == START + timedelta(hours=4)


def test_set_current_position() -> None:
    progress = _make_progress()
    moved_at = START + timedelta(minutes=5)

    progress.set_current_position(UnitId(2), LessonId(9), now=moved_at)

    assert progress.current_unit_id == UnitId(2)
    assert progress.current_lesson_id == LessonId(9)
    assert progress.updated_at == moved_at
