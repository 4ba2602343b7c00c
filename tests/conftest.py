"""Shared test fixtures for moodcheck."""

import sys
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mood.models import MoodEntry  # noqa: E402


def make_entry(
    entry_id: int,
    day,
    mood_type: str = "Neutral",
    sentiment_score=0.5,
    description: str = "",
    created_at: str | None = None,
) -> MoodEntry:
    """Build a MoodEntry; ``day`` may be a date, an ISO string or None."""
    if isinstance(day, str):
        day = date.fromisoformat(day)
    return MoodEntry(
        id=entry_id,
        date=day,
        mood_type=mood_type,
        description=description or f"entry {entry_id}",
        sentiment_score=sentiment_score,
        created_at=created_at or f"2024-01-01T00:00:{entry_id:02d}",
    )


class InMemoryStore:
    """Entry store double serving a fixed snapshot."""

    def __init__(self, entries=None):
        self.entries = list(entries or [])
        self.range_calls = []

    def list_all(self):
        return list(self.entries)

    def list_by_date_range(self, start, end):
        self.range_calls.append((start, end))
        # undated rows can still match the SQL text range, so they are passed through
        return [e for e in self.entries if e.date is None or start <= e.date <= end]


class FailingStore:
    """Entry store double whose queries always fail."""

    def __init__(self, error: Exception):
        self.error = error

    def list_all(self):
        raise self.error

    def list_by_date_range(self, start, end):
        raise self.error


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def storage(tmp_path):
    """Real SQLite storage without a sentiment scorer."""
    from mood.storage import MoodStorage

    return MoodStorage(tmp_path / "mood.db")


@pytest.fixture
def mock_llm():
    """LLM provider double returning a canned response."""
    provider = MagicMock()
    provider.provider_name = "mock"
    provider.generate.return_value = "This sounds like a positive day."
    return provider


@pytest.fixture
def no_retry():
    """Retry decorator that calls once and re-raises."""
    from cli.retry import llm_retry

    return llm_retry(max_attempts=1, min_wait=0, max_wait=0)


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def store_factory():
    return InMemoryStore


@pytest.fixture
def failing_store_factory():
    return FailingStore
