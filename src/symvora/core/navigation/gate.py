"""Navigation gate — which screen a request actually lands on."""

from __future__ import annotations

from enum import Enum


class Screen(str, Enum):
    WELCOME = "welcome"
    SIGN_UP = "sign_up"
    LOGIN = "login"
    SYMPTOMS = "symptoms"
    HISTORY = "history"
    SETTINGS = "settings"


INITIAL_SCREEN = Screen.WELCOME

# Reachable only with a signed-in user.
PROTECTED_SCREENS = frozenset({Screen.SYMPTOMS, Screen.HISTORY, Screen.SETTINGS})

# Reachable only without one.
ENTRY_SCREENS = frozenset({Screen.WELCOME, Screen.SIGN_UP, Screen.LOGIN})


def resolve_screen(is_authenticated: bool, requested: Screen) -> Screen:
    """Map a requested (or current) screen to the one that should be shown.

    Signed-out users asking for a protected screen go to sign-up; signed-in
    users asking for an entry screen go to the symptom checker. Anything else
    is allowed through unchanged.
    """
    if not is_authenticated and requested in PROTECTED_SCREENS:
        return Screen.SIGN_UP
    if is_authenticated and requested in ENTRY_SCREENS:
        return Screen.SYMPTOMS
    return requested


def parse_screen(value: str) -> Screen:
    """Look up a screen by value or name, case-insensitively.

    Raises:
        ValueError: If no screen matches.
    """
    key = value.strip().lower().replace("-", "_")
    for screen in Screen:
        if key in (screen.value, screen.name.lower(), screen.value.replace("_", "")):
            return screen
    raise ValueError(f"Unknown screen: {value!r}")
