"""Diagnosis client — the bridge between symptom submissions and LLM calls."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from symvora.core.llm.provider import LLMProvider, ProviderResponse
from symvora.core.llm.response import enforce_disclaimer, strip_markdown
from symvora.core.llm.system_prompt import SYMPTOM_SYSTEM_PROMPT, build_user_message

logger = logging.getLogger(__name__)


class DiagnosisError(Exception):
    """Raised when the diagnosis collaborator cannot produce advice.

    ``message`` is human-readable and safe to show to the user.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@runtime_checkable
class DiagnosisService(Protocol):
    """Plain text in, plain text out. Failures raise ``DiagnosisError``."""

    async def diagnose(self, symptoms: str) -> str: ...


class DiagnosisClient:
    """Invokes the configured LLM provider for a symptom description."""

    def __init__(
        self,
        provider: LLMProvider,
        max_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> None:
        self.provider = provider
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def diagnose(self, symptoms: str) -> str:
        """Return advice text for ``symptoms``.

        Raises:
            DiagnosisError: The provider failed or returned nothing usable.
        """
        try:
            provider_response: ProviderResponse = await self.provider.generate(
                system_message=SYMPTOM_SYSTEM_PROMPT,
                user_message=build_user_message(symptoms),
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as exc:
            logger.warning("Diagnosis provider call failed: %s", exc)
            raise DiagnosisError(str(exc) or type(exc).__name__) from exc

        logger.info(
            "Diagnosis call: model=%s, tokens=%d+%d, latency=%.0fms, input_chars=%d",
            provider_response.model,
            provider_response.input_tokens,
            provider_response.output_tokens,
            provider_response.latency_ms,
            len(symptoms),
        )

        content = strip_markdown(provider_response.content)
        if not content:
            raise DiagnosisError("The diagnosis service returned an empty response")

        content, appended = enforce_disclaimer(content)
        if appended:
            logger.info("Disclaimer appended to %s response", provider_response.model)
        return content
