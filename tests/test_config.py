"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from cli.config import find_config, get_paths, load_config, load_config_model
from cli.config_models import MoodConfig
from shared_types import SentimentMode


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """No config file anywhere on the search path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


def _write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


class TestDefaults:
    def test_defaults(self, isolated):
        config = load_config_model()
        assert config.llm.provider == "auto"
        assert config.llm.max_tokens == 150
        assert config.sentiment.mode == SentimentMode.KEYWORD
        assert config.sentiment.fallback_score == 0.5
        assert config.trends.default_days == 30
        assert config.coaching.happy_examples == 10
        assert config.coaching.sad_examples == 5
        assert config.logging.level == "WARNING"

    def test_no_config_found(self, isolated):
        assert find_config() is None

    def test_db_path_expanded(self, isolated):
        paths = get_paths(load_config())
        assert paths["db_path"] == isolated / "home" / "moodcheck" / "mood.db"


class TestLoadYAML:
    def test_loads_values(self, isolated):
        _write(
            isolated / "config.yaml",
            "llm:\n  provider: claude\n  temperature: 0.2\n"
            "sentiment:\n  mode: llm\n"
            "trends:\n  default_days: 7\n"
            "logging:\n  level: debug\n",
        )
        config = load_config_model()
        assert config.llm.provider == "claude"
        assert config.llm.temperature == 0.2
        assert config.sentiment.mode == SentimentMode.LLM
        assert config.trends.default_days == 7
        assert config.logging.level == "DEBUG"

    def test_home_location(self, isolated):
        cfg_dir = isolated / "home" / "moodcheck"
        cfg_dir.mkdir(parents=True)
        _write(cfg_dir / "config.yaml", "paths:\n  db_path: ~/data/m.db\n")

        assert find_config() == cfg_dir / "config.yaml"
        assert get_paths(load_config())["db_path"] == isolated / "home" / "data" / "m.db"

    def test_empty_file(self, isolated):
        _write(isolated / "config.yaml", "")
        assert load_config_model().llm.provider == "auto"

    def test_invalid_yaml(self, isolated):
        _write(isolated / "config.yaml", "llm: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config_model()

    @pytest.mark.parametrize(
        "text",
        [
            "llm:\n  provider: llama\n",
            "trends:\n  default_days: 14\n",
            "sentiment:\n  fallback_score: 1.5\n",
            "sentiment:\n  mode: magic\n",
            "logging:\n  level: LOUD\n",
            "coaching:\n  happy_examples: 50\n",
            "coaching:\n  sad_examples: 6\n",
        ],
    )
    def test_validation_errors(self, isolated, text):
        _write(isolated / "config.yaml", text)
        with pytest.raises(ValueError, match="Config validation failed"):
            load_config_model()

    def test_explicit_path(self, tmp_path):
        path = _write(tmp_path / "custom.yaml", "coaching:\n  happy_examples: 3\n")
        assert load_config_model(path).coaching.happy_examples == 3


class TestEnvExpansion:
    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("MY_MOOD_KEY", "sk-secret")
        config = MoodConfig.from_dict({"llm": {"api_key": "${MY_MOOD_KEY}"}})
        assert config.llm.api_key == "sk-secret"

    def test_missing_env_gives_empty(self, monkeypatch):
        monkeypatch.delenv("MY_MOOD_KEY", raising=False)
        config = MoodConfig.from_dict({"llm": {"api_key": "${MY_MOOD_KEY}"}})
        assert config.llm.api_key == ""

    def test_round_trip_dict(self):
        data = MoodConfig().to_dict()
        assert data["retry"]["max_attempts"] == 3
        assert MoodConfig.from_dict(data).trends.default_days == 30
