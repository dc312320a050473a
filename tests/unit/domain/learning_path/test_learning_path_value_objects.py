"""Tests for Accuracy, Progress and Answer."""

from datetime import UTC, datetime

import pytest

from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.common.value_objects import FlashcardId
from learnloop.domain.learning_path.value_objects import Accuracy, Answer, Progress

ANSWERED = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


class TestAccuracy:
    @pytest.mark.parametrize(
        ("correct", "total", "expected"),
        [(0, 0, 0), (2, 3, 67), (1, 3, 33), (1, 8, 13), (4, 4, 100)],
    )
    def test_from_ratio_rounds_half_up(self, correct: int, total: int, expected: int) -> None:
        assert Accuracy.from_ratio(correct, total).percent == expected

    def test_correct_above_total_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            Accuracy.from_ratio(5, 4)

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range_is_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Accuracy(value)

    def test_thresholds(self) -> None:
        assert Accuracy(91).is_above(90)
        assert not Accuracy(90).is_above(90)
        assert Accuracy(59).is_below(60)
        assert Accuracy.perfect().is_perfect
        assert Accuracy.zero().is_zero
        assert Accuracy(75).decimal == 0.75


class TestProgress:
    def test_percentage_and_remaining(self) -> None:
        progress = Progress(1, 3)

        assert progress.percentage == 33
        assert progress.remaining == 2
        assert not progress.is_complete

    def test_advance_until_complete(self) -> None:
        progress = Progress.zero(2).advance().advance()

        assert progress.is_complete
        with pytest.raises(ValidationError, match="already complete"):
            progress.advance()

    def test_completed_above_total_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            Progress(3, 2)

    def test_empty_progress_has_zero_decimal(self) -> None:
        assert Progress.zero(0).decimal == 0.0


class TestAnswer:
    def test_negative_time_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="negative"):
            Answer(FlashcardId(1), True, ANSWERED, time_spent_seconds=-1)

    def test_speed_checks_ignore_unknown_timing(self) -> None:
        timed = Answer(FlashcardId(1), True, ANSWERED, time_spent_seconds=4)
        untimed = Answer(FlashcardId(1), False, ANSWERED)

        assert timed.is_fast(5)
        assert not timed.is_slow(5)
        assert not untimed.is_fast(5)
        assert untimed.is_incorrect

    def test_to_primitive(self) -> None:
        answer = Answer(FlashcardId(9), True, ANSWERED, time_spent_seconds=3)

        assert answer.to_primitive() == {
            "flashcard_id": 9,
            "correct": True,
            "answered_at": ANSWERED.isoformat(),
            "time_spent_seconds": 3,
        }
