"""Tests for XP, Hearts and Streak value objects."""

from datetime import UTC, datetime, timedelta

import pytest

from learnloop.domain.common.exceptions import DomainError, ValidationError
from learnloop.domain.gamification.value_objects import XP, Hearts, Streak

DAY_ONE = datetime(2024, 3, 15, 9, 0, tzinfo=UTC)


class TestXP:
    @pytest.mark.parametrize(("a", "b"), [(0, 0), (5, 10), (95, 10), (1000, 1)])
    def test_add_sums_amounts(self, a: int, b: int) -> None:
        assert XP(a).add(XP(b)).amount == a + b

    def test_subtract(self) -> None:
        assert XP(10).subtract(XP(4)) == XP(6)

    def test_subtract_more_than_available_fails(self) -> None:
        with pytest.raises(ValidationError, match="Cannot subtract more XP than available"):
            XP(3).subtract(XP(4))

    def test_negative_amount_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot be negative"):
            XP(-1)

    def test_multiply_rounds_down(self) -> None:
        assert XP(15).multiply(1.5) == XP(22)
        assert XP(10).multiply(0) == XP.zero()

    def test_multiply_by_negative_factor_fails(self) -> None:
        with pytest.raises(ValidationError, match="negative factor"):
            XP(10).multiply(-1)

    def test_comparisons(self) -> None:
        assert XP(5).is_greater_than(XP(4))
        assert XP(4).is_less_than(XP(5))
        assert not XP(5).is_less_than(XP(5))


class TestHearts:
    def test_full_has_five(self) -> None:
        assert Hearts.full().remaining == 5
        assert Hearts.full().is_full

    @pytest.mark.parametrize("count", [-1, 6])
    def test_out_of_range_is_rejected(self, count: int) -> None:
        with pytest.raises(ValidationError, match="between 0 and 5"):
            Hearts.create(count)

    def test_sixth_deduct_fails_with_no_hearts(self) -> None:
        hearts = Hearts.create(5)
        for _ in range(5):
            hearts = hearts.deduct()
        assert hearts.is_empty

        with pytest.raises(DomainError, match="No hearts remaining") as exc_info:
            hearts.deduct()
        assert exc_info.value.code == "NO_HEARTS"

    def test_refill_when_full_is_a_no_op(self) -> None:
        hearts = Hearts.full()
        assert hearts.refill_one() is hearts

    def test_refill_one_and_all(self) -> None:
        assert Hearts.create(2).refill_one() == Hearts.create(3)
        assert Hearts.empty().refill_all() == Hearts.full()

    def test_is_low_and_missing(self) -> None:
        assert Hearts.create(2).is_low
        assert not Hearts.empty().is_low
        assert not Hearts.create(3).is_low
        assert Hearts.create(2).missing == 3


class TestStreak:
    def test_first_activity_starts_at_one(self) -> None:
        streak = Streak.start().increment(DAY_ONE)
        assert streak.count == 1
        assert streak.last_activity_date == DAY_ONE

    def test_same_day_activity_does_not_increment_twice(self) -> None:
        streak = Streak.start().increment(DAY_ONE)
        assert streak.increment(DAY_ONE + timedelta(hours=8)).count == 1

    def test_next_day_activity_increments(self) -> None:
        streak = Streak.start().increment(DAY_ONE)
        assert streak.increment(DAY_ONE + timedelta(days=1)).count == 2

    def test_gap_restarts_at_one(self) -> None:
        streak = Streak.from_count(6, DAY_ONE)
        restarted = streak.increment(DAY_ONE + timedelta(days=3))
        assert restarted.count == 1
        assert streak.breaks_on(DAY_ONE + timedelta(days=3))

    def test_is_active_today_or_yesterday(self) -> None:
        streak = Streak.from_count(3, DAY_ONE)
        assert streak.is_active(DAY_ONE)
        assert streak.is_active(DAY_ONE + timedelta(days=1))
        assert not streak.is_active(DAY_ONE + timedelta(days=2))
        assert not Streak.start().is_active(DAY_ONE)

    def test_milestones(self) -> None:
        assert Streak.from_count(14, DAY_ONE).is_milestone()
        assert not Streak.from_count(0, None).is_milestone()
        assert Streak.from_count(5, DAY_ONE).days_until_next_milestone() == 2

    def test_negative_count_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot be negative"):
            Streak.from_count(-1, None)
