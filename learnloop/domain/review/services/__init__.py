from .spaced_repetition_service import SpacedRepetitionService

__all__ = ["SpacedRepetitionService"]
