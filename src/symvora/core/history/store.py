"""Symptom history store — in-memory, newest-first log of past checks.

The store is created once per application and injected into whatever needs
it. Every public method takes the internal lock, and reads hand back copies,
so a caller never observes a half-applied insertion and a returned snapshot
never changes after the fact.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from symvora.core.history.models import SymptomHistoryEntry, now_ms
from symvora.core.history.samples import DAY_MS, SampleEntry, load_sample_entries

logger = logging.getLogger(__name__)

DEBUG_ENTRY_SYMPTOMS = "Test symptom entry"
DEBUG_ENTRY_RESPONSE = "This is a test AI response for debugging purposes."


class HistoryStore:
    """Append-only symptom history with search and one-time sample seeding.

    Usage::

        history = HistoryStore()
        history.add_entry("cough", "Rest and stay hydrated.")
        matches = history.search("COUGH")
    """

    def __init__(self, samples: Sequence[SampleEntry] | None = None) -> None:
        self._entries: list[SymptomHistoryEntry] = []
        self._initialized = False
        self._last_timestamp = 0
        self._samples = samples
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add_entry(self, symptoms: str, ai_response: str) -> SymptomHistoryEntry:
        """Create an entry stamped with the current time and put it at the head.

        Content is not validated; callers reject blank symptoms beforehand.
        """
        with self._lock:
            # Never go backwards, even if the wall clock does.
            timestamp = max(now_ms(), self._last_timestamp)
            self._last_timestamp = timestamp
            entry = SymptomHistoryEntry(
                symptoms=symptoms,
                ai_response=ai_response,
                timestamp=timestamp,
            )
            self._entries.insert(0, entry)
        logger.info("History entry %s added (%d total)", entry.id, len(self))
        return entry

    def add_debug_entry(self) -> SymptomHistoryEntry:
        """Insert the fixed test entry used to exercise the history screen."""
        return self.add_entry(DEBUG_ENTRY_SYMPTOMS, DEBUG_ENTRY_RESPONSE)

    def initialize_with_sample_data(self) -> bool:
        """Seed the built-in sample entries once.

        Returns True when this call seeded, False if seeding already happened.
        """
        with self._lock:
            if self._initialized:
                return False
            samples = self._samples if self._samples is not None else load_sample_entries()
            now = now_ms()
            self._entries.extend(
                SymptomHistoryEntry(
                    symptoms=sample.symptoms,
                    ai_response=sample.ai_response,
                    timestamp=now - sample.age_days * DAY_MS,
                )
                for sample in samples
            )
            self._initialized = True
            count = len(samples)
        logger.info("Seeded %d sample history entries", count)
        return True

    def clear(self) -> None:
        """Remove every entry. Samples stay suppressed after a clear."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.info("History cleared (%d entries removed)", removed)

    def reset_to_initial_state(self) -> None:
        """Remove every entry and allow sample seeding again."""
        with self._lock:
            self._entries.clear()
            self._initialized = False
        logger.info("History reset to initial state")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def has_been_initialized(self) -> bool:
        with self._lock:
            return self._initialized

    def get_all(self) -> list[SymptomHistoryEntry]:
        """Return a snapshot of the log, most recent first."""
        with self._lock:
            return list(self._entries)

    def search(self, query: str) -> list[SymptomHistoryEntry]:
        """Case-insensitive substring match over symptoms, response and id.

        A blank query returns the same as ``get_all()``. Matches are sorted by
        timestamp, newest first; entries sharing a timestamp keep store order.
        """
        if not query or not query.strip():
            return self.get_all()

        needle = query.lower()
        with self._lock:
            matches = [
                entry
                for entry in self._entries
                if needle in entry.symptoms.lower()
                or needle in entry.ai_response.lower()
                or needle in entry.id.lower()
            ]
        return sorted(matches, key=lambda entry: entry.timestamp, reverse=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
