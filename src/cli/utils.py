"""Shared CLI utilities."""

import sys
from functools import wraps

import structlog
from rich.console import Console

from db import StorageError

console = Console()
logger = structlog.get_logger()


def get_components(skip_llm: bool = False):
    """Initialize storage, analysis and LLM components from config.

    Args:
        skip_llm: If True, never build an LLM provider (keyword sentiment only,
            fallback coaching)
    """
    from cli.config import get_paths, load_config_model
    from cli.retry import retry_from_config
    from llm import LLMError, LLMRateLimitError, create_llm_provider
    from mood import MoodStorage, PatternAnalyzer, TrendAggregator
    from mood.coaching import MoodCoach
    from mood.sentiment import KeywordSentimentOracle, LLMSentimentOracle, SentimentScorer
    from shared_types import SentimentMode

    config_model = load_config_model()
    config = config_model.to_dict()
    paths = get_paths(config)
    llm_cfg = config_model.llm

    llm_provider = None
    if not skip_llm:
        try:
            llm_provider = create_llm_provider(
                provider=llm_cfg.provider,
                api_key=llm_cfg.api_key,
                model=llm_cfg.model,
                temperature=llm_cfg.temperature,
            )
        except LLMError as e:
            logger.warning("llm.unavailable", error=str(e))

    retry = retry_from_config(config, exceptions=(LLMRateLimitError,))

    if config_model.sentiment.mode == SentimentMode.LLM and llm_provider is not None:
        oracle = LLMSentimentOracle(llm_provider, max_tokens=llm_cfg.max_tokens, retry=retry)
    else:
        oracle = KeywordSentimentOracle()
    scorer = SentimentScorer(oracle, fallback=config_model.sentiment.fallback_score)

    storage = MoodStorage(paths["db_path"], scorer=scorer)
    aggregator = TrendAggregator(storage)
    analyzer = PatternAnalyzer(
        storage,
        happy_limit=config_model.coaching.happy_examples,
        sad_limit=config_model.coaching.sad_examples,
    )
    coach = MoodCoach(
        analyzer, llm_provider, max_tokens=llm_cfg.coaching_max_tokens, retry=retry
    )

    return {
        "config": config,
        "config_model": config_model,
        "paths": paths,
        "storage": storage,
        "scorer": scorer,
        "aggregator": aggregator,
        "analyzer": analyzer,
        "coach": coach,
        "llm": llm_provider,
    }


def handle_storage_errors(func):
    """Turn StorageError into a red message and exit code 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except StorageError as e:
            logger.error("storage.failed", error=str(e))
            console.print(f"[red]Storage error:[/] {e}")
            sys.exit(1)

    return wrapper


def truncate(text: str, width: int = 50) -> str:
    text = " ".join((text or "").split())
    return text if len(text) <= width else text[: width - 1] + "…"
