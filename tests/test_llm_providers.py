"""Tests for LLM provider adapters."""

from unittest.mock import MagicMock

import pytest

from llm import LLMAuthError, LLMError, LLMRateLimitError
from llm.providers.claude import ClaudeProvider
from llm.providers.openai import OpenAIProvider

USER = [{"role": "user", "content": "Please analyze this mood description: fine"}]


class TestClaudeProvider:
    def test_generate(self):
        mock_client = MagicMock()
        mock_client.messages.create.return_value = MagicMock(content=[MagicMock(text="Sounds okay")])

        provider = ClaudeProvider(client=mock_client)
        result = provider.generate(messages=USER, system="Be kind", max_tokens=100)

        assert result == "Sounds okay"
        mock_client.messages.create.assert_called_once_with(
            model="claude-3-5-haiku-latest",
            max_tokens=100,
            temperature=0.7,
            messages=USER,
            system="Be kind",
        )

    def test_generate_no_system(self):
        mock_client = MagicMock()
        mock_client.messages.create.return_value = MagicMock(content=[MagicMock(text="ok")])

        ClaudeProvider(client=mock_client).generate(messages=USER)

        assert "system" not in mock_client.messages.create.call_args.kwargs

    def test_auth_error(self):
        from anthropic import AuthenticationError

        mock_client = MagicMock()
        mock_client.messages.create.side_effect = AuthenticationError(
            message="bad key", response=MagicMock(status_code=401), body={}
        )

        with pytest.raises(LLMAuthError):
            ClaudeProvider(client=mock_client).generate(messages=USER)

    def test_rate_limit_error(self):
        from anthropic import RateLimitError

        mock_client = MagicMock()
        mock_client.messages.create.side_effect = RateLimitError(
            message="rate limited", response=MagicMock(status_code=429), body={}
        )

        with pytest.raises(LLMRateLimitError):
            ClaudeProvider(client=mock_client).generate(messages=USER)

    def test_unexpected_error_wrapped(self):
        mock_client = MagicMock()
        mock_client.messages.create.side_effect = RuntimeError("boom")

        with pytest.raises(LLMError, match="boom"):
            ClaudeProvider(client=mock_client).generate(messages=USER)


class TestOpenAIProvider:
    def _client(self, content="Sounds positive"):
        mock_client = MagicMock()
        mock_resp = MagicMock()
        mock_resp.choices = [MagicMock(message=MagicMock(content=content))]
        mock_client.chat.completions.create.return_value = mock_resp
        return mock_client

    def test_generate(self):
        mock_client = self._client()
        provider = OpenAIProvider(client=mock_client, temperature=0.3)

        assert provider.generate(messages=USER, system="Be kind", max_tokens=150) == "Sounds positive"

        call_kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert call_kwargs["model"] == "gpt-3.5-turbo"
        assert call_kwargs["max_tokens"] == 150
        assert call_kwargs["temperature"] == 0.3
        assert call_kwargs["messages"][0] == {"role": "system", "content": "Be kind"}
        assert call_kwargs["messages"][1] == USER[0]

    def test_generate_no_system(self):
        mock_client = self._client()
        OpenAIProvider(client=mock_client).generate(messages=USER)

        assert len(mock_client.chat.completions.create.call_args.kwargs["messages"]) == 1

    def test_unexpected_error_wrapped(self):
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = RuntimeError("boom")

        with pytest.raises(LLMError, match="OpenAI error"):
            OpenAIProvider(client=mock_client).generate(messages=USER)
