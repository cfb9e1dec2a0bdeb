"""MCP tools for browsing and managing symptom history."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

from symvora.core.navigation.gate import Screen
from symvora.domains.symptoms.tools.gating import enter_screen

if TYPE_CHECKING:
    from symvora.core.history.store import HistoryStore
    from symvora.domains.symptoms.flow.screen_flow import ScreenFlow


def register_history_tools(
    mcp: FastMCP,
    history: HistoryStore,
    screen_flow: ScreenFlow,
) -> None:
    """Register symptom history tools on the MCP server."""

    @mcp.tool
    def search_history(query: str = "") -> str:
        """Search previous symptom checks.

        Matches symptoms, advice text and entry ids, ignoring case. Leave the
        query empty to list everything, newest first.

        Args:
            query: Text to look for.
        """
        denied = enter_screen(screen_flow, Screen.HISTORY)
        if denied:
            return denied

        entries = history.search(query)
        total = len(history)
        return json.dumps({
            "status": "ok",
            "query": query,
            "count": len(entries),
            "total": total,
            "summary": (
                f"{len(entries)} entries ({total} total)"
                if not query.strip()
                else f"{len(entries)} found"
            ),
            "entries": [entry.to_dict() for entry in entries],
        }, indent=2)

    @mcp.tool
    def clear_history() -> str:
        """Delete all history entries. Example entries will not come back."""
        denied = enter_screen(screen_flow, Screen.HISTORY)
        if denied:
            return denied
        history.clear()
        return json.dumps({"status": "ok", "total": len(history)})

    @mcp.tool
    def reset_history() -> str:
        """Delete all entries and restore the built-in example entries."""
        denied = enter_screen(screen_flow, Screen.HISTORY)
        if denied:
            return denied
        history.reset_to_initial_state()
        history.initialize_with_sample_data()
        return json.dumps({"status": "ok", "total": len(history)})

    @mcp.tool
    def add_test_history_entry() -> str:
        """Add a fixed test entry to the history (debugging aid)."""
        denied = enter_screen(screen_flow, Screen.HISTORY)
        if denied:
            return denied
        entry = history.add_debug_entry()
        return json.dumps({"status": "ok", "entry": entry.to_dict()})
