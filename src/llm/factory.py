"""LLM provider factory with auto-detection."""

import os

from .base import LLMError, LLMProvider

_PROVIDER_ENV_KEYS = {
    "openai": "OPENAI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
}

_AUTO_DETECT_ORDER = ["openai", "claude"]


def create_llm_provider(
    provider: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    temperature: float = 0.7,
    client=None,
) -> LLMProvider:
    """Create an LLM provider instance.

    Args:
        provider: "openai", "claude", "auto", or None (auto-detect)
        api_key: Explicit API key (overrides env var)
        model: Model name (None = provider default)
        temperature: Sampling temperature
        client: Pre-built SDK client for testing/DI

    Returns:
        LLMProvider instance
    """
    resolved = provider or "auto"

    if resolved == "auto":
        resolved = _auto_detect_provider(api_key)

    if resolved not in _PROVIDER_ENV_KEYS:
        raise LLMError(f"Unknown provider: {resolved}. Use: openai, claude")

    if not api_key and not client:
        env_var = _PROVIDER_ENV_KEYS[resolved]
        api_key = os.getenv(env_var)
        if not api_key:
            raise LLMError(f"No API key for {resolved}. Set {env_var} or llm.api_key in config")

    if resolved == "openai":
        from .providers.openai import OpenAIProvider

        return OpenAIProvider(api_key=api_key, model=model, temperature=temperature, client=client)

    from .providers.claude import ClaudeProvider

    return ClaudeProvider(api_key=api_key, model=model, temperature=temperature, client=client)


def _detect_provider_from_key(api_key: str) -> str | None:
    """Infer provider from API key prefix."""
    if api_key.startswith("sk-ant-"):
        return "claude"
    if api_key.startswith("sk-"):
        return "openai"
    return None


def _auto_detect_provider(api_key: str | None = None) -> str:
    """Detect provider from explicit key prefix, then env vars."""
    if api_key:
        inferred = _detect_provider_from_key(api_key)
        if inferred:
            return inferred

    for name in _AUTO_DETECT_ORDER:
        env_var = _PROVIDER_ENV_KEYS[name]
        if os.getenv(env_var):
            return name
    raise LLMError("No LLM API key found. Set one of: OPENAI_API_KEY, ANTHROPIC_API_KEY")
