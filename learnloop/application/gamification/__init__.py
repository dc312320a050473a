"""Gamification use cases: learner progress, hearts and streaks."""
