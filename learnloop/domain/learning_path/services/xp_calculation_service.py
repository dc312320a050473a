"""
Domain service for XP rewards.

Pure reward arithmetic: lesson XP with accuracy tiers, streak and daily
goal bonuses, unit completion rewards and combo multipliers.
"""

from learnloop.domain.gamification.value_objects import XP, Streak
from learnloop.domain.learning_path.value_objects import Accuracy

PERFECT_ACCURACY_BONUS = 15
HIGH_ACCURACY_BONUS = 10
GOOD_ACCURACY_BONUS = 5
FLAWLESS_BONUS = 10
PERFECT_LESSON_BONUS = 25
UNIT_ALL_LESSONS_BONUS = 25
UNIT_ALL_LESSONS_THRESHOLD = 5
UNIT_HIGH_ACCURACY_BONUS = 20
UNIT_GOOD_ACCURACY_BONUS = 10

# (minimum streak days, bonus XP), highest tier first
STREAK_BONUS_TIERS: tuple[tuple[int, int], ...] = ((100, 100), (30, 30), (14, 20), (7, 15), (3, 10))
# (minimum goals completed, bonus XP)
DAILY_GOAL_TIERS: tuple[tuple[int, int], ...] = ((5, 50), (3, 30), (1, 10))
# (minimum consecutive correct answers, multiplier)
COMBO_TIERS: tuple[tuple[int, float], ...] = ((10, 2.0), (5, 1.5), (3, 1.2))


def _tier(value: int, tiers: tuple[tuple[int, int], ...]) -> int:
    for threshold, reward in tiers:
        if value >= threshold:
            return reward
    return 0


class XPCalculationService:
    """Stateless XP reward calculations."""

    def calculate_lesson_xp(self, base_reward: int, accuracy: Accuracy, is_perfect: bool) -> XP:
        """
        XP for a completed lesson.

        Args:
            base_reward: Lesson base XP
            accuracy: Final lesson accuracy
            is_perfect: Whether every answer was correct

        Returns:
            Base reward plus the accuracy tier bonus (+15 at 100%, +10 above
            90%, +5 above 80%) and +10 for a flawless lesson
        """
        total = (
            base_reward
            + self.calculate_accuracy_bonus(accuracy)
            + self.calculate_flawless_bonus(accuracy, is_perfect)
        )
        return XP.from_amount(total)

    def calculate_accuracy_bonus(self, accuracy: Accuracy) -> int:
        if accuracy.is_perfect:
            return PERFECT_ACCURACY_BONUS
        if accuracy.is_above(90):
            return HIGH_ACCURACY_BONUS
        if accuracy.is_above(80):
            return GOOD_ACCURACY_BONUS
        return 0

    def calculate_flawless_bonus(self, accuracy: Accuracy, is_perfect: bool) -> int:
        return FLAWLESS_BONUS if is_perfect and accuracy.is_perfect else 0

    def calculate_streak_bonus(self, streak: Streak) -> XP:
        return XP.from_amount(_tier(streak.count, STREAK_BONUS_TIERS))

    def calculate_unit_completion_xp(
        self, unit_base_reward: int, lessons_completed: int, average_accuracy: Accuracy
    ) -> XP:
        total = unit_base_reward
        if lessons_completed >= UNIT_ALL_LESSONS_THRESHOLD:
            total += UNIT_ALL_LESSONS_BONUS
        if average_accuracy.is_above(90):
            total += UNIT_HIGH_ACCURACY_BONUS
        elif average_accuracy.is_above(80):
            total += UNIT_GOOD_ACCURACY_BONUS
        return XP.from_amount(total)

    def calculate_daily_goal_bonus(self, goals_completed: int) -> XP:
        return XP.from_amount(_tier(goals_completed, DAILY_GOAL_TIERS))

    def calculate_combo_multiplier(self, consecutive_correct: int) -> float:
        for threshold, multiplier in COMBO_TIERS:
            if consecutive_correct >= threshold:
                return multiplier
        return 1.0

    def calculate_total_xp(
        self,
        base_xp: XP,
        streak: Streak | None = None,
        is_perfect: bool = False,
        consecutive_correct: int = 0,
    ) -> XP:
        """Combine base XP with streak bonus, then combo multiplier, then perfect bonus."""
        total = base_xp
        if streak is not None:
            total = total.add(self.calculate_streak_bonus(streak))

        multiplier = self.calculate_combo_multiplier(consecutive_correct)
        if multiplier > 1.0:
            total = total.multiply(multiplier)

        if is_perfect:
            total = total.add(XP.from_amount(PERFECT_LESSON_BONUS))
        return total
