"""Sentiment scoring for mood descriptions, on a 0 (negative) to 1 (positive) scale."""

import re

import structlog

from cli.retry import llm_retry
from llm import LLMRateLimitError

logger = structlog.get_logger()

NEUTRAL_SCORE = 0.5

# Lexicon-based sentiment (no external deps needed)
_POSITIVE = {
    "great", "good", "excellent", "happy", "excited", "proud", "accomplished",
    "progress", "success", "win", "awesome", "fantastic", "love", "enjoy",
    "productive", "motivated", "inspired", "grateful", "thankful", "confident",
    "calm", "relaxed", "peaceful", "fun", "rewarding", "hopeful", "cheerful",
    "joy", "joyful", "content", "wonderful", "optimistic", "energized", "glad",
}

_NEGATIVE = {
    "bad", "terrible", "frustrated", "stuck", "stressed", "anxious", "sad",
    "overwhelmed", "exhausted", "burnout", "failed", "struggling", "lonely",
    "confused", "worried", "disappointed", "tired", "difficult", "hard",
    "lost", "down", "depressed", "upset", "drained", "cry", "crying",
    "angry", "annoyed", "boring", "painful", "hopeless", "awful", "miserable",
}

# Keywords looked for in the model's free-text analysis, checked in order.
_ANALYSIS_BUCKETS = (
    (("positive", "happy", "good", "great"), 0.8),
    (("neutral", "okay", "fine"), 0.5),
    (("negative", "sad", "bad", "worried"), 0.2),
)

_ANALYSIS_SYSTEM = (
    "You are a mental health AI assistant. Analyze the sentiment of the user's "
    "mood description and provide a brief, supportive response. "
    "Focus on understanding and empathy."
)


def keyword_score(text: str) -> float:
    """Score text by counting positive vs negative lexicon words.

    Returns 0.5 when no sentiment words are present.
    """
    words = set(re.findall(r"\b[a-z]+\b", text.lower()))
    pos = len(words & _POSITIVE)
    neg = len(words & _NEGATIVE)
    total = pos + neg
    if total == 0:
        return NEUTRAL_SCORE
    return round(NEUTRAL_SCORE + NEUTRAL_SCORE * (pos - neg) / total, 2)


def score_analysis(analysis: str) -> float:
    """Map a model's written analysis to 0.8 / 0.5 / 0.2."""
    lowered = analysis.lower()
    for keywords, score in _ANALYSIS_BUCKETS:
        if any(k in lowered for k in keywords):
            return score
    return NEUTRAL_SCORE


class KeywordSentimentOracle:
    """Local heuristic scorer."""

    name = "keyword"

    def score(self, text: str) -> float:
        return keyword_score(text)


class LLMSentimentOracle:
    """Ask a language model to read the description, then bucket its answer."""

    name = "llm"

    def __init__(self, llm_provider, max_tokens: int = 150, retry=None):
        """
        Args:
            llm_provider: LLMProvider used for the analysis call
            max_tokens: Response budget
            retry: Optional tenacity decorator; defaults to retrying rate limits
        """
        self.llm = llm_provider
        self.max_tokens = max_tokens
        retry = retry or llm_retry(exceptions=(LLMRateLimitError,))
        self._generate = retry(llm_provider.generate)

    def analyze(self, text: str) -> str:
        return self._generate(
            messages=[
                {"role": "user", "content": f"Please analyze this mood description: {text}"}
            ],
            system=_ANALYSIS_SYSTEM,
            max_tokens=self.max_tokens,
        )

    def score(self, text: str) -> float:
        return score_analysis(self.analyze(text) or "")


class SentimentScorer:
    """Wrap an oracle so saving an entry never fails because scoring did.

    Scores are clamped to [0, 1]; any oracle error yields ``fallback``.
    """

    def __init__(self, oracle, fallback: float = NEUTRAL_SCORE):
        self.oracle = oracle
        self.fallback = fallback

    def score(self, text: str) -> float:
        if not text or not text.strip():
            return self.fallback
        try:
            value = float(self.oracle.score(text))
        except Exception as e:
            logger.warning(
                "sentiment.oracle_failed",
                oracle=getattr(self.oracle, "name", type(self.oracle).__name__),
                error=str(e),
            )
            return self.fallback
        return min(1.0, max(0.0, value))
