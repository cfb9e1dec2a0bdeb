"""Anthropic Claude provider for symptom diagnosis."""

from __future__ import annotations

import logging
import time

from symvora.core.llm.provider import ProviderResponse

logger = logging.getLogger(__name__)


class AnthropicProvider:
    """Diagnosis provider backed by the Anthropic Messages API.

    Claude may split an answer over several content blocks; the advice is
    the concatenation of every text block, in order.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        timeout: float = 30.0,
    ) -> None:
        import anthropic

        self.client = anthropic.AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)
        self.model = model

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> ProviderResponse:
        start = time.monotonic()
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=temperature,
            system=system_message,
            messages=[{"role": "user", "content": user_message}],
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        advice = "".join(
            block.text for block in response.content or [] if getattr(block, "type", "") == "text"
        )
        if getattr(response, "stop_reason", None) == "max_tokens":
            logger.warning("Diagnosis from %s cut off at %d tokens", self.model, max_tokens)

        usage = response.usage
        return ProviderResponse(
            content=advice,
            input_tokens=usage.input_tokens if usage else 0,
            output_tokens=usage.output_tokens if usage else 0,
            model=self.model,
            latency_ms=elapsed_ms,
        )
