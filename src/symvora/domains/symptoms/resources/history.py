"""MCP Resources for symptom history."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

if TYPE_CHECKING:
    from symvora.core.history.store import HistoryStore
    from symvora.core.session.state import SessionState


def register_history_resources(
    mcp: FastMCP,
    history: HistoryStore,
    session: SessionState,
) -> None:
    """Register symptom history resources on the MCP server."""

    @mcp.resource("history://entries")
    def history_entries_resource() -> str:
        """All symptom history entries, newest first (signed-in users only)."""
        if not session.is_authenticated():
            return json.dumps({"status": "authentication_required", "entries": []})
        entries = history.get_all()
        return json.dumps(
            {
                "status": "ok",
                "count": len(entries),
                "entries": [entry.to_dict() for entry in entries],
            },
            indent=2,
        )
