"""Shared test fixtures for Symvora tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_PROVIDER", "mock")
    monkeypatch.setenv("DEEPSEEK_API_KEY", "")
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from symvora.core.history.samples import SampleEntry  # noqa: E402
from symvora.core.history.store import HistoryStore  # noqa: E402
from symvora.core.llm.client import DiagnosisError  # noqa: E402
from symvora.core.notifications.center import NotificationCenter  # noqa: E402
from symvora.core.session.models import User  # noqa: E402
from symvora.core.session.state import SessionState  # noqa: E402


# ---------------------------------------------------------------------------
# Fake diagnosis collaborator
# ---------------------------------------------------------------------------

class FakeDiagnosisService:
    """Diagnosis collaborator that records calls and returns or raises on cue.

    ``release`` can be set to an ``asyncio.Event`` to hold the call open so a
    test can observe the in-flight state.
    """

    def __init__(
        self,
        advice: str = "Rest and stay hydrated.",
        error: Exception | None = None,
    ) -> None:
        self.advice = advice
        self.error = error
        self.calls: list[str] = []
        self.release = None

    async def diagnose(self, symptoms: str) -> str:
        self.calls.append(symptoms)
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.advice


@pytest.fixture
def fake_diagnosis() -> FakeDiagnosisService:
    return FakeDiagnosisService()


@pytest.fixture
def failing_diagnosis() -> FakeDiagnosisService:
    return FakeDiagnosisService(error=DiagnosisError("timeout"))


# ---------------------------------------------------------------------------
# Core state fixtures
# ---------------------------------------------------------------------------

SAMPLE_ENTRIES = [
    SampleEntry(symptoms="Sample headache", ai_response="Sample advice one", age_days=1),
    SampleEntry(symptoms="Sample cough", ai_response="Sample advice two", age_days=2),
    SampleEntry(symptoms="Sample stomach ache", ai_response="Sample advice three", age_days=3),
]


@pytest.fixture
def history() -> HistoryStore:
    """History store seeded from a fixed in-test sample set."""
    return HistoryStore(samples=SAMPLE_ENTRIES)


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def signed_in_session(session: SessionState) -> SessionState:
    session.set_user(User(email="ada@example.com", name="Ada"))
    return session


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def accounts():
    from symvora.core.accounts.in_memory import InMemoryAccountService

    return InMemoryAccountService()
