"""Mood pattern analysis over journal history, used for stats and coaching."""

from datetime import date
from typing import Optional

import structlog

from shared_types import MoodType

from .models import MoodEntry, MoodPatterns, MoodStatistics
from .scoring import mean_mood, mean_sentiment
from .trends import window_bounds

logger = structlog.get_logger()

RECENT_HAPPY_LIMIT = 10
RECENT_SAD_LIMIT = 5

NO_DATA = "No data available"
NO_MOOD_DATA = "No mood data available"
GENERALLY_POSITIVE = "Generally positive outlook"
TENDS_NEGATIVE = "Tends toward negative moods"
MODERATELY_POSITIVE = "Moderately positive pattern"
MODERATELY_NEGATIVE = "Moderately negative pattern"
BALANCED = "Balanced mood pattern"


def determine_overall_pattern(
    happy_count: int, neutral_count: int, sad_count: int, avg_mood_score: float
) -> str:
    """Label the overall pattern. First matching rule wins:

    happy >= 60%, sad >= 40%, average >= 3.5, average <= 2.5, otherwise balanced.
    """
    total = happy_count + neutral_count + sad_count
    if total == 0:
        return NO_MOOD_DATA

    happy_pct = happy_count / total * 100
    sad_pct = sad_count / total * 100

    if happy_pct >= 60:
        return GENERALLY_POSITIVE
    if sad_pct >= 40:
        return TENDS_NEGATIVE
    if avg_mood_score >= 3.5:
        return MODERATELY_POSITIVE
    if avg_mood_score <= 2.5:
        return MODERATELY_NEGATIVE
    return BALANCED


def newest_first(entries: list[MoodEntry]) -> list[MoodEntry]:
    """Sort by (date desc, created_at desc); undated entries go last."""
    return sorted(
        entries,
        key=lambda e: (e.date is not None, e.date or date.min, e.created_at or ""),
        reverse=True,
    )


def _count(entries: list[MoodEntry], mood_type: MoodType) -> int:
    return sum(1 for e in entries if e.mood_type == mood_type)


def _descriptions(entries: list[MoodEntry], mood_type: MoodType, limit: int) -> list[str]:
    return [e.description for e in entries if e.mood_type == mood_type][:limit]


class PatternAnalyzer:
    """Summarize mood history into counts, averages and a pattern label."""

    def __init__(
        self,
        store,
        happy_limit: int = RECENT_HAPPY_LIMIT,
        sad_limit: int = RECENT_SAD_LIMIT,
    ):
        """
        Args:
            store: Entry store exposing ``list_all()`` and ``list_by_date_range()``
            happy_limit: Max recent happy descriptions kept, at most 10
            sad_limit: Max recent sad descriptions kept, at most 5
        """
        self.store = store
        self.happy_limit = max(0, min(happy_limit, RECENT_HAPPY_LIMIT))
        self.sad_limit = max(0, min(sad_limit, RECENT_SAD_LIMIT))

    def get_mood_patterns(self) -> MoodPatterns:
        entries = self.store.list_all()
        patterns = self.summarize(entries, self.happy_limit, self.sad_limit)
        logger.info("patterns.computed", entries=len(entries), pattern=patterns.overall_pattern)
        return patterns

    def get_mood_statistics(self, days: int, today: Optional[date] = None) -> MoodStatistics:
        """Counts and averages for the last ``days`` days, zeros when empty.

        Entries whose stored date could not be parsed are left out.
        """
        start, end = window_bounds(days, today)
        entries = []
        for entry in self.store.list_by_date_range(start, end):
            if entry.date is None:
                logger.warning("stats.skip_undated", entry_id=entry.id)
                continue
            entries.append(entry)
        return self.statistics(entries)

    @staticmethod
    def statistics(entries: list[MoodEntry]) -> MoodStatistics:
        if not entries:
            return MoodStatistics()
        return MoodStatistics(
            happy_count=_count(entries, MoodType.HAPPY),
            neutral_count=_count(entries, MoodType.NEUTRAL),
            sad_count=_count(entries, MoodType.SAD),
            avg_mood_score=mean_mood(entries),
            avg_sentiment_score=mean_sentiment(entries),
        )

    @staticmethod
    def summarize(
        entries: list[MoodEntry],
        happy_limit: int = RECENT_HAPPY_LIMIT,
        sad_limit: int = RECENT_SAD_LIMIT,
    ) -> MoodPatterns:
        if not entries:
            return MoodPatterns(overall_pattern=NO_DATA)

        happy_limit = max(0, min(happy_limit, RECENT_HAPPY_LIMIT))
        sad_limit = max(0, min(sad_limit, RECENT_SAD_LIMIT))
        stats = PatternAnalyzer.statistics(entries)
        ordered = newest_first(entries)
        return MoodPatterns(
            happy_count=stats.happy_count,
            neutral_count=stats.neutral_count,
            sad_count=stats.sad_count,
            avg_mood_score=stats.avg_mood_score,
            avg_sentiment_score=stats.avg_sentiment_score,
            overall_pattern=determine_overall_pattern(
                stats.happy_count, stats.neutral_count, stats.sad_count, stats.avg_mood_score
            ),
            recent_happy_moments=_descriptions(ordered, MoodType.HAPPY, happy_limit),
            recent_sad_moments=_descriptions(ordered, MoodType.SAD, sad_limit),
        )
