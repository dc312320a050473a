"""Literal types shared by the lesson and review modules."""

from typing import Literal

Difficulty = Literal["easy", "medium", "hard"]
ReviewMode = Literal["flashcard", "quiz", "recall"]

REVIEW_MODES: tuple[ReviewMode, ...] = ("flashcard", "quiz", "recall")
