"""AI coaching suggestions grounded in the user's mood history."""

import structlog

from cli.retry import llm_retry
from llm import LLMError, LLMRateLimitError
from shared_types import MoodType

from .models import MoodPatterns
from .patterns import MODERATELY_NEGATIVE, NO_DATA, TENDS_NEGATIVE

logger = structlog.get_logger()

SYSTEM_PROMPT = """You are a warm, practical mood coach inside a personal journaling app.

Your suggestions should be:
- Short (3-5 sentences or bullets)
- Grounded in the user's own history, citing what has lifted their mood before
- Supportive, never clinical or judgmental
- Clear that you are not a substitute for professional help when moods are persistently low"""

COACHING_PROMPT = """The user just logged their mood.

CURRENT MOOD: {mood_type}
WHAT THEY WROTE: {description}

THEIR MOOD HISTORY:
{history}

Suggest one or two concrete things they could do today, drawing on moments that made them happy before."""


def format_patterns(patterns: MoodPatterns, max_happy: int = 10, max_sad: int = 5) -> str:
    """Render a pattern summary as prompt context."""
    if patterns.overall_pattern == NO_DATA:
        return "No previous entries."
    if patterns.total == 0:
        return (
            "- Previous entries exist, but none uses a recognized mood (Happy, Neutral, Sad).\n"
            f"- Average AI sentiment: {patterns.avg_sentiment_score:.2f} / 1\n"
            f"- Overall pattern: {patterns.overall_pattern}"
        )

    lines = [
        f"- Entries: {patterns.total} "
        f"(Happy {patterns.happy_count} / {patterns.percentage(patterns.happy_count):.0f}%, "
        f"Neutral {patterns.neutral_count} / {patterns.percentage(patterns.neutral_count):.0f}%, "
        f"Sad {patterns.sad_count} / {patterns.percentage(patterns.sad_count):.0f}%)",
        f"- Average mood: {patterns.avg_mood_score:.1f} / 5",
        f"- Average AI sentiment: {patterns.avg_sentiment_score:.2f} / 1",
        f"- Overall pattern: {patterns.overall_pattern}",
    ]
    if patterns.recent_happy_moments:
        lines.append("- Recent happy moments:")
        lines.extend(f"  * {m}" for m in patterns.recent_happy_moments[:max_happy])
    if patterns.recent_sad_moments:
        lines.append("- Recent sad moments:")
        lines.extend(f"  * {m}" for m in patterns.recent_sad_moments[:max_sad])
    return "\n".join(lines)


def build_coaching_prompt(mood_type: str, description: str, patterns: MoodPatterns) -> str:
    return COACHING_PROMPT.format(
        mood_type=mood_type,
        description=description.strip() or "(no description)",
        history=format_patterns(patterns),
    )


def fallback_coaching(mood_type: str, patterns: MoodPatterns) -> str:
    """Deterministic suggestion used when the model is unavailable."""
    if mood_type == MoodType.HAPPY:
        return (
            "Great to hear you're feeling good. Take a moment to note what made today "
            "work so you can come back to it on harder days."
        )

    if patterns.recent_happy_moments:
        moments = "; ".join(patterns.recent_happy_moments[:3])
        suggestion = f"Things that lifted your mood recently: {moments}. Could you fit one of them in today?"
    else:
        suggestion = "Try something small that usually helps, like a short walk or messaging a friend."

    if mood_type == MoodType.SAD and patterns.overall_pattern in (TENDS_NEGATIVE, MODERATELY_NEGATIVE):
        suggestion += (
            " Your entries have leaned low for a while; talking to someone you trust "
            "or a professional can help."
        )
    return suggestion


class MoodCoach:
    """Request coaching from an LLM using the analyzer's pattern summary."""

    def __init__(self, analyzer, llm_provider=None, max_tokens: int = 300, retry=None):
        """
        Args:
            analyzer: PatternAnalyzer supplying ``get_mood_patterns()``
            llm_provider: Optional LLMProvider; None means always use the fallback
            max_tokens: Response budget
            retry: Optional tenacity decorator; defaults to retrying rate limits
        """
        self.analyzer = analyzer
        self.llm = llm_provider
        self.max_tokens = max_tokens
        self._generate = None
        if llm_provider is not None:
            retry = retry or llm_retry(exceptions=(LLMRateLimitError,))
            self._generate = retry(llm_provider.generate)

    def _ask(self, prompt: str) -> str:
        return self._generate(
            messages=[{"role": "user", "content": prompt}],
            system=SYSTEM_PROMPT,
            max_tokens=self.max_tokens,
        )

    def get_coaching(self, mood_type: str, description: str) -> str:
        patterns = self.analyzer.get_mood_patterns()
        if self.llm is None:
            return fallback_coaching(mood_type, patterns)

        prompt = build_coaching_prompt(mood_type, description, patterns)
        try:
            response = self._ask(prompt)
        except LLMError as e:
            logger.warning("coaching.llm_failed", error=str(e))
            return fallback_coaching(mood_type, patterns)

        return (response or "").strip() or fallback_coaching(mood_type, patterns)
