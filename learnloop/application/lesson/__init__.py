"""Lesson use cases: starting, answering, completing and abandoning lessons."""
