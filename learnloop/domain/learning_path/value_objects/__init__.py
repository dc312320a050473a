"""Learning path value objects."""

from .accuracy import Accuracy
from .answer import Answer
from .progress import Progress

__all__ = ["Accuracy", "Answer", "Progress"]
