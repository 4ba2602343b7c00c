"""Mood journal records and the derived aggregates computed from them."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from shared_types import SentimentCategory

from .scoring import normalize_mood

POSITIVE_THRESHOLD = 0.7
NEGATIVE_THRESHOLD = 0.3


def sentiment_category(score: Optional[float]) -> SentimentCategory:
    """Bucket a [0,1] sentiment score into a display category."""
    if score is None:
        return SentimentCategory.UNKNOWN
    if score >= POSITIVE_THRESHOLD:
        return SentimentCategory.POSITIVE
    if score <= NEGATIVE_THRESHOLD:
        return SentimentCategory.NEGATIVE
    return SentimentCategory.NEUTRAL


@dataclass
class MoodEntry:
    """One journal record as stored.

    ``date`` is the logical day the entry belongs to and is None when the
    stored value could not be parsed. ``created_at`` only breaks ties between
    entries sharing a date.
    """

    id: int
    date: Optional[date]
    mood_type: str
    description: str
    sentiment_score: Optional[float] = None
    created_at: Optional[str] = None

    @property
    def formatted_date(self) -> str:
        return self.date.isoformat() if self.date else "Unknown"

    @property
    def sentiment_category(self) -> SentimentCategory:
        return sentiment_category(self.sentiment_score)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "mood_type": self.mood_type,
            "description": self.description,
            "sentiment_score": self.sentiment_score,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class TrendPoint:
    """One day's averages: mood on the 1-5 scale, AI sentiment on 0-1."""

    date: date
    avg_mood: float
    avg_ai: float

    @property
    def normalized_mood(self) -> float:
        return normalize_mood(self.avg_mood)


@dataclass(frozen=True)
class MoodStatistics:
    happy_count: int = 0
    neutral_count: int = 0
    sad_count: int = 0
    avg_mood_score: float = 0.0
    avg_sentiment_score: float = 0.0

    @property
    def total(self) -> int:
        return self.happy_count + self.neutral_count + self.sad_count


@dataclass(frozen=True)
class MoodPatterns:
    """Whole-history summary handed to the coaching prompt."""

    happy_count: int = 0
    neutral_count: int = 0
    sad_count: int = 0
    avg_mood_score: float = 0.0
    avg_sentiment_score: float = 0.0
    overall_pattern: str = "No data available"
    recent_happy_moments: list[str] = field(default_factory=list)
    recent_sad_moments: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.happy_count + self.neutral_count + self.sad_count

    def percentage(self, count: int) -> float:
        """Share of ``count`` in all counted entries, 0-100."""
        return count / self.total * 100 if self.total else 0.0
