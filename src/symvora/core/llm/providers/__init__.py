"""LLM provider implementations."""

from symvora.core.llm.providers.anthropic import AnthropicProvider
from symvora.core.llm.providers.mock import MockProvider
from symvora.core.llm.providers.openai import OpenAIProvider

__all__ = ["AnthropicProvider", "MockProvider", "OpenAIProvider"]
