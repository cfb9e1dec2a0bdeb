"""LLM provider protocol — abstract interface for diagnosis LLM calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

DEEPSEEK_BASE_URL = "https://api.deepseek.com"


@dataclass
class ProviderResponse:
    """Response from an LLM provider."""

    content: str
    input_tokens: int
    output_tokens: int
    model: str
    latency_ms: float


@runtime_checkable
class LLMProvider(Protocol):
    """Abstract interface for chat-completion calls."""

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> ProviderResponse: ...


def create_provider(
    provider_name: str,
    api_key: str = "",
    model: str = "",
    base_url: str = "",
    timeout: float = 30.0,
) -> LLMProvider:
    """Factory function to create an LLM provider by name.

    Args:
        provider_name: "deepseek", "openai", "anthropic", or "mock"
        api_key: API key for the provider.
        model: Model identifier override.
        base_url: Endpoint override (DeepSeek and other OpenAI-compatible APIs).
        timeout: Request timeout in seconds.

    Returns:
        An LLMProvider instance.
    """
    if provider_name == "deepseek":
        from symvora.core.llm.providers.openai import OpenAIProvider

        return OpenAIProvider(
            api_key=api_key,
            model=model or "deepseek-chat",
            base_url=base_url or DEEPSEEK_BASE_URL,
            timeout=timeout,
        )
    elif provider_name == "openai":
        from symvora.core.llm.providers.openai import OpenAIProvider

        return OpenAIProvider(
            api_key=api_key,
            model=model or "gpt-4o",
            base_url=base_url or None,
            timeout=timeout,
        )
    elif provider_name == "anthropic":
        from symvora.core.llm.providers.anthropic import AnthropicProvider

        return AnthropicProvider(
            api_key=api_key,
            model=model or "claude-sonnet-4-20250514",
            timeout=timeout,
        )
    elif provider_name == "mock":
        from symvora.core.llm.providers.mock import MockProvider

        return MockProvider()
    else:
        raise ValueError(f"Unknown LLM provider: {provider_name}")
