"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime

import pytest

from learnloop.config import get_settings


@pytest.fixture
def now() -> datetime:
    """A fixed clock value: Friday 2024-03-15 12:00 UTC."""
    return datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Environment overrides in one test must not leak through the settings cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
