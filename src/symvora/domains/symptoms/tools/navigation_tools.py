"""MCP tools for moving between screens."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

from symvora.core.navigation.gate import parse_screen

if TYPE_CHECKING:
    from symvora.core.session.state import SessionState
    from symvora.domains.symptoms.flow.screen_flow import ScreenFlow


def register_navigation_tools(
    mcp: FastMCP,
    screen_flow: ScreenFlow,
    session: SessionState,
) -> None:
    """Register screen navigation tools on the MCP server."""

    @mcp.tool
    def navigate(screen: str) -> str:
        """Go to a screen: welcome, sign_up, login, symptoms, history or settings.

        Protected screens redirect to sign-up when nobody is signed in, and
        entry screens redirect to symptoms once signed in.

        Args:
            screen: Name of the requested screen.
        """
        try:
            requested = parse_screen(screen)
        except ValueError as exc:
            return json.dumps({"status": "error", "error": str(exc)})

        actual = screen_flow.navigate(requested)
        return json.dumps({
            "status": "ok",
            "requested_screen": requested.value,
            "current_screen": actual.value,
            "redirected": actual is not requested,
        })

    @mcp.tool
    def current_screen() -> str:
        """Show the current screen and who is signed in."""
        user = session.current_user
        return json.dumps({
            "current_screen": screen_flow.current.value,
            "authenticated": user is not None,
            "user": user.to_dict() if user is not None else None,
        })
