"""Tests for mood category to score mapping."""

import pytest

from mood.scoring import mean, mean_sentiment, mood_type_to_score, normalize_mood
from shared_types import MoodType


class TestMoodTypeToScore:
    @pytest.mark.parametrize(
        "mood_type,expected",
        [("Happy", 5.0), ("Neutral", 3.0), ("Sad", 1.0)],
    )
    def test_known_moods(self, mood_type, expected):
        assert mood_type_to_score(mood_type) == expected

    def test_enum_members(self):
        assert mood_type_to_score(MoodType.HAPPY) == 5.0
        assert mood_type_to_score(MoodType.SAD) == 1.0

    @pytest.mark.parametrize("mood_type", ["happy", "Angry", "", None, "SAD "])
    def test_unknown_defaults_to_neutral(self, mood_type):
        assert mood_type_to_score(mood_type) == 3.0


class TestNormalizeMood:
    def test_scale_endpoints(self):
        assert normalize_mood(1.0) == 0.0
        assert normalize_mood(5.0) == 1.0
        assert normalize_mood(3.0) == 0.5


class TestMean:
    def test_empty_is_zero(self):
        assert mean([]) == 0.0

    def test_generator_input(self):
        assert mean(x for x in [1.0, 2.0, 3.0]) == 2.0


class TestMeanSentiment:
    def test_missing_counts_as_zero(self, entry_factory):
        entries = [
            entry_factory(1, "2024-01-01", sentiment_score=0.8),
            entry_factory(2, "2024-01-01", sentiment_score=None),
        ]
        assert mean_sentiment(entries) == pytest.approx(0.4)

    def test_non_numeric_counts_as_zero(self, entry_factory):
        entries = [
            entry_factory(1, "2024-01-01", sentiment_score=0.9),
            entry_factory(2, "2024-01-01", sentiment_score="very good"),
            entry_factory(3, "2024-01-01", sentiment_score=True),
        ]
        assert mean_sentiment(entries) == pytest.approx(0.3)

    def test_integer_scores(self, entry_factory):
        assert mean_sentiment([entry_factory(1, "2024-01-01", sentiment_score=1)]) == 1.0
