"""Pydantic configuration models for moodcheck."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from shared_types import SentimentMode

VALID_LLM_PROVIDERS = {"auto", "openai", "claude"}
VALID_TREND_WINDOWS = (7, 30, 90)


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = "auto"
    model: Optional[str] = None  # None = use provider default
    api_key: Optional[str] = None
    max_tokens: int = 150
    coaching_max_tokens: int = 300
    temperature: float = 0.7

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if v not in VALID_LLM_PROVIDERS:
            raise ValueError(f"Invalid LLM provider: {v}. Must be one of {VALID_LLM_PROVIDERS}")
        return v

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError(f"temperature must be 0-2, got {v}")
        return v


class PathsConfig(BaseModel):
    """File paths configuration."""

    db_path: Path = Path("~/moodcheck/mood.db")
    log_file: Path = Path("~/moodcheck/moodcheck.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.db_path = self.db_path.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class SentimentConfig(BaseModel):
    """Sentiment oracle selection."""

    mode: SentimentMode = SentimentMode.KEYWORD
    fallback_score: float = 0.5

    @field_validator("fallback_score")
    @classmethod
    def validate_fallback(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"fallback_score must be 0-1, got {v}")
        return v


class TrendsConfig(BaseModel):
    """Trend chart defaults."""

    default_days: int = 30

    @field_validator("default_days")
    @classmethod
    def validate_days(cls, v: int) -> int:
        if v not in VALID_TREND_WINDOWS:
            raise ValueError(f"default_days must be one of {VALID_TREND_WINDOWS}, got {v}")
        return v


class CoachingConfig(BaseModel):
    """How much history goes into a coaching request."""

    happy_examples: int = Field(default=10, ge=0, le=10)
    sad_examples: int = Field(default=5, ge=0, le=5)


class RetryConfig(BaseModel):
    """Retry/backoff configuration."""

    max_attempts: int = 3
    min_wait: float = 2.0
    llm_max_wait: float = 30.0


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file_level: str = "DEBUG"
    json_logs: bool = False
    to_file: bool = False

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class MoodConfig(BaseModel):
    """Main configuration model."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    trends: TrendsConfig = Field(default_factory=TrendsConfig)
    coaching: CoachingConfig = Field(default_factory=CoachingConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} patterns in API keys."""
        if self.llm.api_key:
            key = self.llm.api_key
            if key.startswith("${") and key.endswith("}"):
                env_var = key[2:-1]
                self.llm.api_key = os.getenv(env_var, "")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "MoodConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
