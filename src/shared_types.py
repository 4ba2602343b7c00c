"""Shared enums and types for moodcheck."""

from enum import StrEnum


class MoodType(StrEnum):
    HAPPY = "Happy"
    NEUTRAL = "Neutral"
    SAD = "Sad"


class SentimentCategory(StrEnum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    UNKNOWN = "Unknown"


class SentimentMode(StrEnum):
    KEYWORD = "keyword"
    LLM = "llm"
