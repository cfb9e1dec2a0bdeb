"""Tests for SymptomCheckController — the submission flow."""

from __future__ import annotations

import asyncio

import pytest

from symvora.core.llm.client import DiagnosisError
from symvora.domains.symptoms.flow.submission import (
    PLACEHOLDER_TEXT,
    SymptomCheckController,
)


def _run(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _controller(diagnosis, history, notifications) -> SymptomCheckController:
    return SymptomCheckController(diagnosis, history, notifications)


class TestValidation:
    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_blank_input_rejected(self, fake_diagnosis, history, notifications, text):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            return controller.submit(text)

        assert _run(_scenario()) is None
        assert fake_diagnosis.calls == []
        assert len(history) == 0
        assert notifications.peek()[-1].message == "Please enter your symptoms first."
        assert not controller.state.is_loading


class TestSuccess:
    def test_records_one_entry_with_advice(self, fake_diagnosis, history, notifications):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            return await controller.submit("cough")

        outcome = _run(_scenario())
        assert outcome.succeeded
        assert outcome.result_text == "Rest and stay hydrated."
        assert fake_diagnosis.calls == ["cough"]
        entries = history.get_all()
        assert len(entries) == 1
        assert entries[0].symptoms == "cough"
        assert entries[0].ai_response == "Rest and stay hydrated."
        assert controller.state.result_text == "Rest and stay hydrated."
        assert not controller.state.is_loading
        assert controller.inflight is None

    def test_input_is_kept_as_typed(self, fake_diagnosis, history, notifications):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            return await controller.submit("  cough\n")

        _run(_scenario())
        assert fake_diagnosis.calls == ["  cough\n"]
        assert history.get_all()[0].symptoms == "  cough\n"

    def test_no_error_notification(self, fake_diagnosis, history, notifications):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            return await controller.submit("cough")

        _run(_scenario())
        assert notifications.peek() == []


class TestFailure:
    def test_failure_is_recorded(self, failing_diagnosis, history, notifications):
        controller = _controller(failing_diagnosis, history, notifications)

        async def _scenario():
            return await controller.submit("cough")

        outcome = _run(_scenario())
        assert not outcome.succeeded
        entries = history.get_all()
        assert len(entries) == 1
        assert entries[0].symptoms == "cough"
        assert "timeout" in entries[0].ai_response
        assert entries[0].ai_response == "Error: timeout"
        assert controller.state.result_text == "Error: timeout"
        assert not controller.state.is_loading

    def test_failure_raises_notification(self, failing_diagnosis, history, notifications):
        controller = _controller(failing_diagnosis, history, notifications)

        async def _scenario():
            return await controller.submit("cough")

        _run(_scenario())
        last = notifications.peek()[-1]
        assert last.level == "error"
        assert last.message == "Error analyzing symptoms: timeout"

    def test_unexpected_exception_is_recorded(self, fake_diagnosis, history, notifications):
        fake_diagnosis.error = RuntimeError("socket closed")
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            return await controller.submit("cough")

        outcome = _run(_scenario())
        assert not outcome.succeeded
        assert history.get_all()[0].ai_response == "Error: socket closed"


class TestInFlight:
    def test_loading_state_and_placeholder(self, fake_diagnosis, history, notifications):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            fake_diagnosis.release = asyncio.Event()
            task = controller.submit("cough")
            await asyncio.sleep(0)
            during = controller.state
            stored_during = history.get_all()
            fake_diagnosis.release.set()
            await task
            return during, stored_during

        during, stored_during = _run(_scenario())
        assert during.is_loading
        assert not during.can_submit
        assert during.result_text == PLACEHOLDER_TEXT
        assert stored_during == []
        assert all(e.ai_response != PLACEHOLDER_TEXT for e in history.get_all())

    def test_second_submission_rejected_while_loading(self, fake_diagnosis, history, notifications):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            fake_diagnosis.release = asyncio.Event()
            first = controller.submit("cough")
            second = controller.submit("fever")
            fake_diagnosis.release.set()
            await first
            return second

        assert _run(_scenario()) is None
        assert fake_diagnosis.calls == ["cough"]
        assert len(history) == 1

    def test_can_submit_again_after_completion(self, fake_diagnosis, history, notifications):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            await controller.submit("cough")
            await controller.submit("fever")

        _run(_scenario())
        assert [e.symptoms for e in history.get_all()] == ["fever", "cough"]

    def test_result_survives_leaving_the_request(self, fake_diagnosis, history, notifications):
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            fake_diagnosis.release = asyncio.Event()
            task = controller.submit("cough")
            # The caller stops waiting; the check still completes on the loop.
            fake_diagnosis.release.set()
            while not task.done():
                await asyncio.sleep(0)

        _run(_scenario())
        assert len(history) == 1
        assert history.get_all()[0].ai_response == "Rest and stay hydrated."


class TestDiagnosisErrorMessage:
    def test_error_text_is_not_the_raw_input(self, fake_diagnosis, history, notifications):
        fake_diagnosis.error = DiagnosisError("service unavailable")
        controller = _controller(fake_diagnosis, history, notifications)

        async def _scenario():
            return await controller.submit("my secret symptoms")

        outcome = _run(_scenario())
        assert outcome.result_text == "Error: service unavailable"
        assert "my secret symptoms" not in outcome.result_text
