"""Tests for LLM factory and auto-detection."""

from unittest.mock import MagicMock, patch

import pytest

from llm import LLMError, create_llm_provider
from llm.factory import _auto_detect_provider, _detect_provider_from_key


@pytest.fixture
def no_keys(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


class TestAutoDetection:
    def test_detects_anthropic_key(self, no_keys, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        assert _auto_detect_provider() == "claude"

    def test_detects_openai_key(self, no_keys, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert _auto_detect_provider() == "openai"

    def test_prefers_openai_when_multiple(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert _auto_detect_provider() == "openai"

    def test_explicit_key_prefix_wins(self, no_keys, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert _auto_detect_provider("sk-ant-abc") == "claude"

    def test_no_keys_raises(self, no_keys):
        with pytest.raises(LLMError, match="No LLM API key found"):
            _auto_detect_provider()

    @pytest.mark.parametrize(
        "key,expected",
        [("sk-ant-api03-x", "claude"), ("sk-proj-x", "openai"), ("AIza-x", None)],
    )
    def test_key_prefix(self, key, expected):
        assert _detect_provider_from_key(key) == expected


class TestCreateProvider:
    def test_explicit_claude_with_client(self):
        mock_client = MagicMock()
        provider = create_llm_provider(provider="claude", client=mock_client)
        assert provider.provider_name == "claude"
        assert provider.client is mock_client

    def test_explicit_openai_with_client(self):
        mock_client = MagicMock()
        provider = create_llm_provider(provider="openai", client=mock_client)
        assert provider.provider_name == "openai"
        assert provider.model == "gpt-3.5-turbo"

    def test_unknown_provider_raises(self):
        with pytest.raises(LLMError, match="Unknown provider"):
            create_llm_provider(provider="llama", client=MagicMock())

    def test_explicit_provider_without_key_raises(self, no_keys):
        with pytest.raises(LLMError, match="OPENAI_API_KEY"):
            create_llm_provider(provider="openai")

    def test_auto_with_anthropic_key(self, no_keys, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        with patch("anthropic.Anthropic") as mock_cls:
            provider = create_llm_provider()
        assert provider.provider_name == "claude"
        assert mock_cls.call_args.kwargs["api_key"] == "sk-ant-test"

    def test_auto_with_openai_key(self, no_keys, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        with patch("openai.OpenAI"):
            provider = create_llm_provider(provider="auto")
        assert provider.provider_name == "openai"

    def test_custom_model_and_temperature(self):
        provider = create_llm_provider(
            provider="claude", client=MagicMock(), model="claude-3-opus-latest", temperature=0.2
        )
        assert provider.model == "claude-3-opus-latest"
        assert provider.temperature == 0.2
