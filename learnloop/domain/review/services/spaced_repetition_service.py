"""
Domain service for spaced-repetition scheduling.

A simplified SM-2 variant: the default path maps the run of trailing
correct reviews onto a fixed interval ladder, and an ease-factor path
grows intervals multiplicatively.
"""

import math
from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from learnloop.domain.common.calendar import add_days, utc_now
from learnloop.domain.common.exceptions import ValidationError
from learnloop.domain.review.value_objects import ReviewInterval

MIN_EASE_FACTOR = 1.3
MAX_EASE_FACTOR = 2.5

STRUGGLING_CONSECUTIVE_FAILURES = 3
STRUGGLING_MIN_ATTEMPTS = 5
STRUGGLING_FAILURE_RATE = 0.5


class GradedReview(Protocol):
    """Anything that records whether a review was answered correctly."""

    @property
    def is_correct(self) -> bool: ...


def _clamp_ease_factor(ease_factor: float) -> float:
    return max(MIN_EASE_FACTOR, min(MAX_EASE_FACTOR, ease_factor))


class SpacedRepetitionService:
    """
    Stateless review scheduling policy.

    Histories are ordered oldest first; the most recent review is last.
    """

    _LADDER = (
        ReviewInterval.first_review(),
        ReviewInterval.second_review(),
        ReviewInterval.third_review(),
        ReviewInterval.fourth_review(),
    )

    def calculate_next_interval(
        self, history: Sequence[GradedReview], was_correct: bool
    ) -> ReviewInterval:
        """
        Next interval after a review.

        Args:
            history: Previous reviews of the card, oldest first
            was_correct: Outcome of the review being scheduled

        Returns:
            1 day after an incorrect answer. After a correct one the run of
            trailing correct reviews picks the rung: 0 -> 1, 1 -> 3, 2 -> 7,
            3 -> 14, 4 or more -> 30 days.
        """
        if not was_correct:
            return ReviewInterval.first_review()
        successful = self.count_consecutive_successes(history)
        if successful < len(self._LADDER):
            return self._LADDER[successful]
        return ReviewInterval.mastered()

    def calculate_with_ease_factor(
        self, previous: ReviewInterval, ease_factor: float, was_correct: bool
    ) -> ReviewInterval:
        """Ease-factor variant: 1 -> 3 -> 7, then ``ceil(previous * ease)``."""
        if not was_correct:
            return ReviewInterval.first_review()
        if previous.days == 1:
            return ReviewInterval.second_review()
        if previous.days == 3:
            return ReviewInterval.third_review()
        return ReviewInterval.from_days(math.ceil(previous.days * _clamp_ease_factor(ease_factor)))

    def calculate_ease_factor(self, current_ease_factor: float, quality: int) -> float:
        """SM-2 ease factor update for an answer of ``quality`` 0 (blackout) to 5 (perfect)."""
        if not 0 <= quality <= 5:
            raise ValidationError("Answer quality must be between 0 and 5", "quality", quality)
        penalty = 5 - quality
        return _clamp_ease_factor(current_ease_factor + (0.1 - penalty * (0.08 + penalty * 0.02)))

    def count_consecutive_successes(self, history: Sequence[GradedReview]) -> int:
        count = 0
        for review in reversed(history):
            if not review.is_correct:
                break
            count += 1
        return count

    def count_consecutive_failures(self, history: Sequence[GradedReview]) -> int:
        count = 0
        for review in reversed(history):
            if review.is_correct:
                break
            count += 1
        return count

    def should_mark_as_struggling(self, failure_count: int, total_attempts: int) -> bool:
        """
        Struggling after three failures in a row, or after failing more
        than half of at least five attempts.
        """
        if failure_count >= STRUGGLING_CONSECUTIVE_FAILURES:
            return True
        if total_attempts >= STRUGGLING_MIN_ATTEMPTS:
            return failure_count / total_attempts > STRUGGLING_FAILURE_RATE
        return False

    def is_due_for_review(
        self, last_review_date: datetime, interval_days: int, now: datetime | None = None
    ) -> bool:
        """Due from the moment the interval has fully elapsed (inclusive)."""
        return (now or utc_now()) >= add_days(last_review_date, interval_days)

    def days_until_next_review(
        self, last_review_date: datetime, interval_days: int, now: datetime | None = None
    ) -> int:
        """Days left until the card is due, rounded up; negative when overdue."""
        remaining = add_days(last_review_date, interval_days) - (now or utc_now())
        return math.ceil(remaining.total_seconds() / 86400)
