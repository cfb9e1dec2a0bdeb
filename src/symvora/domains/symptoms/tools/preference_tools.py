"""MCP tools for appearance and app settings."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

from symvora.core.navigation.gate import Screen
from symvora.domains.symptoms.tools.gating import enter_screen

if TYPE_CHECKING:
    from symvora.core.notifications.center import NotificationCenter
    from symvora.core.preferences.manager import PreferencesManager
    from symvora.domains.symptoms.flow.screen_flow import ScreenFlow


def register_preference_tools(
    mcp: FastMCP,
    preferences: PreferencesManager,
    screen_flow: ScreenFlow,
    notifications: NotificationCenter,
) -> None:
    """Register settings tools on the MCP server."""

    def _prefs(**extra) -> str:
        return json.dumps({"status": "ok", **preferences.to_dict(), **extra})

    @mcp.tool
    def get_preferences() -> str:
        """Show theme, font size, language and notification settings."""
        denied = enter_screen(screen_flow, Screen.SETTINGS)
        if denied:
            return denied
        return _prefs()

    @mcp.tool
    def toggle_theme() -> str:
        """Switch between light and dark mode."""
        denied = enter_screen(screen_flow, Screen.SETTINGS)
        if denied:
            return denied
        preferences.toggle_theme()
        return _prefs()

    @mcp.tool
    def set_font_size(size: str) -> str:
        """Set the text size.

        Args:
            size: Small, Medium or Large.
        """
        denied = enter_screen(screen_flow, Screen.SETTINGS)
        if denied:
            return denied
        try:
            preferences.set_font_size(size)
        except ValueError as exc:
            notifications.warning(str(exc))
            return json.dumps({"status": "error", "error": str(exc)})
        return _prefs()

    @mcp.tool
    def set_language(language: str) -> str:
        """Choose the app language.

        Args:
            language: Language name, e.g. 'English'.
        """
        denied = enter_screen(screen_flow, Screen.SETTINGS)
        if denied:
            return denied
        if not preferences.set_language(language):
            message = notifications.info("More languages coming soon!").message
            return _prefs(message=message)
        return _prefs()

    @mcp.tool
    def set_push_notifications(enabled: bool) -> str:
        """Turn push notifications on or off.

        Args:
            enabled: True to receive important updates and reminders.
        """
        denied = enter_screen(screen_flow, Screen.SETTINGS)
        if denied:
            return denied
        preferences.set_push_notifications(enabled)
        return _prefs()
