"""Appearance and app preferences: theme palettes, font scaling, language."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Literal

logger = logging.getLogger(__name__)

FontSize = Literal["Small", "Medium", "Large"]

FONT_SCALES: dict[str, float] = {
    "Small": 0.85,
    "Medium": 1.0,
    "Large": 1.15,
}

SUPPORTED_LANGUAGES = ("English",)


@dataclass(frozen=True)
class AppColors:
    primary: str
    background: str
    surface: str
    text_primary: str
    text_secondary: str
    text_tertiary: str


LIGHT_COLORS = AppColors(
    primary="#6C63FF",
    background="#FFFFFF",
    surface="#F9F9F9",
    text_primary="#2E2E2E",
    text_secondary="#666666",
    text_tertiary="#999999",
)

DARK_COLORS = AppColors(
    primary="#8B85FF",
    background="#121212",
    surface="#1E1E1E",
    text_primary="#FFFFFF",
    text_secondary="#B3B3B3",
    text_tertiary="#808080",
)


@dataclass(frozen=True)
class Preferences:
    dark_mode: bool = False
    font_size: FontSize = "Medium"
    language: str = "English"
    push_notifications: bool = True


class PreferencesManager:
    """Holds the current ``Preferences``; each setter swaps in a new record."""

    def __init__(self, preferences: Preferences | None = None) -> None:
        self._prefs = preferences or Preferences()

    @property
    def preferences(self) -> Preferences:
        return self._prefs

    def toggle_theme(self) -> bool:
        """Flip dark mode; returns the new value."""
        return self.set_dark_mode(not self._prefs.dark_mode)

    def set_dark_mode(self, enabled: bool) -> bool:
        self._prefs = dataclasses.replace(self._prefs, dark_mode=enabled)
        logger.info("Dark mode %s", "on" if enabled else "off")
        return enabled

    def set_font_size(self, size: str) -> FontSize:
        """Select a font size by name (case-insensitive).

        Raises:
            ValueError: If ``size`` is not Small, Medium or Large.
        """
        normalized = size.strip().capitalize()
        if normalized not in FONT_SCALES:
            raise ValueError(
                f"Unknown font size {size!r}; expected one of {', '.join(FONT_SCALES)}"
            )
        self._prefs = dataclasses.replace(self._prefs, font_size=normalized)
        return normalized  # type: ignore[return-value]

    @property
    def font_scale(self) -> float:
        return FONT_SCALES[self._prefs.font_size]

    def scaled(self, base_size: float) -> float:
        """Apply the font scale to a base point size."""
        return base_size * self.font_scale

    def palette(self) -> AppColors:
        return DARK_COLORS if self._prefs.dark_mode else LIGHT_COLORS

    def set_language(self, language: str) -> bool:
        """Switch language; only the supported languages are accepted."""
        if language not in SUPPORTED_LANGUAGES:
            return False
        self._prefs = dataclasses.replace(self._prefs, language=language)
        return True

    def set_push_notifications(self, enabled: bool) -> bool:
        self._prefs = dataclasses.replace(self._prefs, push_notifications=enabled)
        return enabled

    def to_dict(self) -> dict[str, Any]:
        return {
            **dataclasses.asdict(self._prefs),
            "font_scale": self.font_scale,
            "colors": dataclasses.asdict(self.palette()),
        }
