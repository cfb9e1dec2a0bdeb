"""Mock LLM provider for offline use and testing."""

from __future__ import annotations

from symvora.core.llm.provider import ProviderResponse

CANNED_ADVICE = (
    "Based on your symptoms, here are some general possibilities:\n\n"
    "Possible Conditions:\n"
    "• Common cold or flu\n"
    "• Seasonal allergies\n"
    "• Stress-related symptoms\n\n"
    "General Advice:\n"
    "• Rest and stay hydrated\n"
    "• Monitor your symptoms\n"
    "• Avoid self-diagnosis\n\n"
    "⚠️ IMPORTANT: This is for informational purposes only. "
    "Always consult a healthcare professional for proper diagnosis and treatment."
)


class MockProvider:
    """Mock provider — returns canned advice, or raises ``error`` when set."""

    def __init__(
        self,
        response_content: str = CANNED_ADVICE,
        error: Exception | None = None,
    ) -> None:
        self.response_content = response_content
        self.error = error
        self.last_system_message: str = ""
        self.last_user_message: str = ""
        self.call_count: int = 0

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> ProviderResponse:
        self.last_system_message = system_message
        self.last_user_message = user_message
        self.call_count += 1
        if self.error is not None:
            raise self.error
        return ProviderResponse(
            content=self.response_content,
            input_tokens=len(system_message.split()) + len(user_message.split()),
            output_tokens=len(self.response_content.split()),
            model="mock",
            latency_ms=0.0,
        )
