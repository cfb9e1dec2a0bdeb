"""Sample history loader — reads the built-in example entries from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

SAMPLE_HISTORY_PATH = Path(__file__).resolve().parent / "sample_history.yaml"

DAY_MS = 86_400_000


@dataclass(frozen=True)
class SampleEntry:
    """A canned history entry, dated relative to the moment of seeding."""

    symptoms: str
    ai_response: str
    age_days: int


def load_sample_entries(path: str | Path = SAMPLE_HISTORY_PATH) -> list[SampleEntry]:
    """Parse the sample history YAML file, newest first."""
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    samples = [
        SampleEntry(
            symptoms=item["symptoms"].strip(),
            ai_response=item["ai_response"].strip(),
            age_days=int(item.get("age_days", 0)),
        )
        for item in data.get("entries", [])
    ]
    samples.sort(key=lambda s: s.age_days)
    logger.debug("Loaded %d sample history entries from %s", len(samples), path)
    return samples
