from .models import MoodEntry, MoodPatterns, MoodStatistics, TrendPoint
from .patterns import PatternAnalyzer
from .scoring import mood_type_to_score
from .storage import MoodStorage
from .trends import TrendAggregator

__all__ = [
    "MoodEntry",
    "MoodPatterns",
    "MoodStatistics",
    "TrendPoint",
    "MoodStorage",
    "TrendAggregator",
    "PatternAnalyzer",
    "mood_type_to_score",
]
