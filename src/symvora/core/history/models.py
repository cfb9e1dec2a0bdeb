"""Data models for the symptom history log."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Display format of the history card timestamp, e.g. "Mar 04, 2026 at 14:05".
DISPLAY_FORMAT = "%b %d, %Y at %H:%M"


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def new_entry_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class SymptomHistoryEntry:
    """One stored symptom submission. Entries are never edited once created."""

    symptoms: str
    ai_response: str
    id: str = field(default_factory=new_entry_id)
    timestamp: int = field(default_factory=now_ms)  # ms since epoch

    def created_at(self) -> str:
        """Local-time rendering of ``timestamp`` for display."""
        return datetime.fromtimestamp(self.timestamp / 1000).strftime(DISPLAY_FORMAT)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "symptoms": self.symptoms,
            "ai_response": self.ai_response,
            "timestamp": self.timestamp,
            "created_at": self.created_at(),
        }
