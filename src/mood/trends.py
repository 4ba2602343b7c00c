"""Daily mood/sentiment trend aggregation for charting."""

from collections import defaultdict
from datetime import date, timedelta
from typing import Optional

import structlog

from .models import MoodEntry, TrendPoint
from .scoring import mean_mood, mean_sentiment

logger = structlog.get_logger()


def window_bounds(days: int, today: Optional[date] = None) -> tuple[date, date]:
    """Inclusive ``[today - (days-1), today]`` window.

    Raises:
        ValueError: If days is not a positive integer
    """
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise ValueError(f"days must be a positive integer, got {days!r}")
    end = today or date.today()
    return end - timedelta(days=days - 1), end


def is_chartable(points: list[TrendPoint]) -> bool:
    """Whether points can be drawn as a line: two or more distinct days."""
    if len(points) < 2:
        return False
    return points[0].date != points[-1].date


class TrendAggregator:
    """Turn a window of mood entries into one averaged point per day."""

    def __init__(self, store):
        """
        Args:
            store: Entry store exposing ``list_by_date_range(start, end)``
        """
        self.store = store

    def find_daily_averages(self, days: int, today: Optional[date] = None) -> list[TrendPoint]:
        """Average mood and AI sentiment per day over the last ``days`` days.

        Days without entries produce no point. Mood averages stay on the 1-5
        scale and AI averages on 0-1; use ``TrendPoint.normalized_mood`` to
        put mood on the AI axis.

        Returns:
            Points sorted oldest first, empty when the window has no entries
        """
        start, end = window_bounds(days, today)
        entries = self.store.list_by_date_range(start, end)
        if not entries:
            logger.info("trends.empty", days=days)
            return []

        points = self.aggregate(entries)
        logger.info("trends.computed", days=days, entries=len(entries), points=len(points))
        return points

    @staticmethod
    def aggregate(entries: list[MoodEntry]) -> list[TrendPoint]:
        """Group entries by date and average each group, oldest date first."""
        by_date: dict[date, list[MoodEntry]] = defaultdict(list)
        for entry in entries:
            if entry.date is None:
                logger.warning("trends.skip_undated", entry_id=entry.id)
                continue
            by_date[entry.date].append(entry)

        points = [
            TrendPoint(date=day, avg_mood=mean_mood(group), avg_ai=mean_sentiment(group))
            for day, group in by_date.items()
        ]
        return sorted(points, key=lambda p: p.date)
