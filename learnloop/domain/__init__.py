"""
Domain layer.

The domain layer holds the progression rules of the platform: XP and
levels, hearts and their regeneration, daily streaks, lesson sessions and
spaced-repetition scheduling. It performs no I/O and has no dependencies on
external frameworks.

This layer contains:
- Value Objects: XP, Hearts, Streak, ReviewInterval, Accuracy, ...
- Aggregate Roots: UserProgress, LessonSession, ReviewSession
- Domain Events: immutable records drained by the application layer
- Domain Services: stateless policy (spaced repetition, XP, heart refill)
"""
