"""Mapping between mood categories and the numeric scales used for trends."""

from typing import Iterable, Optional

import structlog

from shared_types import MoodType

logger = structlog.get_logger()

MOOD_SCORES = {
    MoodType.HAPPY: 5.0,
    MoodType.NEUTRAL: 3.0,
    MoodType.SAD: 1.0,
}
DEFAULT_MOOD_SCORE = 3.0
MIN_MOOD_SCORE = 1.0
MAX_MOOD_SCORE = 5.0


def mood_type_to_score(mood_type: Optional[str]) -> float:
    """Numeric 1-5 score for a mood category. Unknown values score as Neutral."""
    return MOOD_SCORES.get(mood_type, DEFAULT_MOOD_SCORE)


def normalize_mood(avg_mood: float) -> float:
    """Map a 1-5 mood average onto 0-1 so it shares an axis with AI sentiment."""
    return (avg_mood - MIN_MOOD_SCORE) / (MAX_MOOD_SCORE - MIN_MOOD_SCORE)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean, 0.0 for no values."""
    values = list(values)
    return sum(values) / len(values) if values else 0.0


def mean_mood(entries) -> float:
    return mean(mood_type_to_score(e.mood_type) for e in entries)


def sentiment_value(entry) -> float:
    """An entry's sentiment as a number; missing or non-numeric scores count as 0.0."""
    score = entry.sentiment_score
    if score is None:
        return 0.0
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        logger.warning("mood.bad_sentiment", entry_id=entry.id, raw_score=score)
        return 0.0
    return float(score)


def mean_sentiment(entries) -> float:
    return mean(sentiment_value(e) for e in entries)
