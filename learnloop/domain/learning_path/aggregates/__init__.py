from .lesson_session import LessonSession, LessonSessionSnapshot, SessionFlashcard

__all__ = ["LessonSession", "LessonSessionSnapshot", "SessionFlashcard"]
