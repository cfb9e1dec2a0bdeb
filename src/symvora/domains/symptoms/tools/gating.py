"""Shared gate check for tools that belong to a protected screen."""

from __future__ import annotations

import json

from symvora.core.navigation.gate import Screen
from symvora.domains.symptoms.flow.screen_flow import ScreenFlow


def enter_screen(screen_flow: ScreenFlow, screen: Screen) -> str | None:
    """Navigate to ``screen`` for a tool call.

    Returns None when the screen was reached, otherwise the JSON payload the
    tool should return instead of doing its work.
    """
    actual = screen_flow.navigate(screen)
    if actual is screen:
        return None
    return json.dumps({
        "status": "authentication_required",
        "requested_screen": screen.value,
        "current_screen": actual.value,
        "message": "Sign up or log in to use this feature.",
    })
