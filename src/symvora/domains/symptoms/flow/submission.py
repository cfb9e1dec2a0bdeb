"""Symptom submission flow — one symptom check from input to history entry.

``submit()`` validates on the caller's thread, flips the screen into its
loading state and starts an ``asyncio.Task`` for the diagnosis call. The
task's outcome is applied by ``_apply`` on the event loop that owns this
controller, so result text, the loading flag and the history append change
together and never interleave with another mutation. The history entry is
written only once the call has resolved, so the placeholder text is never
stored.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from dataclasses import dataclass

from symvora.core.history.models import SymptomHistoryEntry
from symvora.core.history.store import HistoryStore
from symvora.core.llm.client import DiagnosisError, DiagnosisService
from symvora.core.notifications.center import NotificationCenter
from symvora.core.validation.forms import ValidationError, validate_symptoms

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Analyzing symptoms..."


@dataclass(frozen=True)
class SymptomCheckState:
    """What the symptom screen shows."""

    symptom_text: str = ""
    result_text: str = ""
    is_loading: bool = False

    @property
    def can_submit(self) -> bool:
        return not self.is_loading


@dataclass(frozen=True)
class SymptomCheckOutcome:
    """Final result of one submission."""

    succeeded: bool
    result_text: str
    entry: SymptomHistoryEntry


class SymptomCheckController:
    """Runs at most one diagnosis at a time for one symptom screen."""

    def __init__(
        self,
        diagnosis: DiagnosisService,
        history: HistoryStore,
        notifications: NotificationCenter,
    ) -> None:
        self._diagnosis = diagnosis
        self._history = history
        self._notifications = notifications
        self._state = SymptomCheckState()
        self._inflight: asyncio.Task[SymptomCheckOutcome] | None = None

    @property
    def state(self) -> SymptomCheckState:
        return self._state

    @property
    def inflight(self) -> asyncio.Task[SymptomCheckOutcome] | None:
        return self._inflight

    def submit(self, symptoms: str) -> asyncio.Task[SymptomCheckOutcome] | None:
        """Start a symptom check.

        Must be called from within the running event loop. Returns the task
        that resolves to the ``SymptomCheckOutcome``, or None when the input
        was rejected or a check is already running.
        """
        if not self._state.can_submit:
            self._notifications.info("A symptom check is already in progress.")
            return None

        try:
            text = validate_symptoms(symptoms)
        except ValidationError as exc:
            self._notifications.warning(str(exc))
            return None

        self._state = SymptomCheckState(
            symptom_text=text,
            result_text=PLACEHOLDER_TEXT,
            is_loading=True,
        )
        task = asyncio.get_running_loop().create_task(self._run(text))
        self._inflight = task
        logger.info("Symptom check started (%d chars)", len(text))
        return task

    async def _run(self, symptoms: str) -> SymptomCheckOutcome:
        try:
            advice = await self._diagnosis.diagnose(symptoms)
        except DiagnosisError as exc:
            return self._apply(symptoms, succeeded=False, message=exc.message)
        except Exception as exc:
            logger.exception("Diagnosis collaborator raised unexpectedly")
            return self._apply(symptoms, succeeded=False, message=str(exc) or type(exc).__name__)
        return self._apply(symptoms, succeeded=True, message=advice)

    def _apply(self, symptoms: str, *, succeeded: bool, message: str) -> SymptomCheckOutcome:
        result_text = message if succeeded else f"Error: {message}"
        entry = self._history.add_entry(symptoms, result_text)
        self._state = dataclasses.replace(
            self._state,
            result_text=result_text,
            is_loading=False,
        )
        self._inflight = None
        if succeeded:
            logger.info("Symptom check completed (entry %s)", entry.id)
        else:
            logger.warning("Symptom check failed (entry %s): %s", entry.id, message)
            self._notifications.error(f"Error analyzing symptoms: {message}")
        return SymptomCheckOutcome(succeeded=succeeded, result_text=result_text, entry=entry)
