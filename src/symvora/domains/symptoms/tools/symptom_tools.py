"""MCP tools for running symptom checks."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING

from fastmcp import Context, FastMCP

from symvora.core.llm.system_prompt import DISCLAIMER
from symvora.core.navigation.gate import Screen
from symvora.domains.symptoms.tools.gating import enter_screen

if TYPE_CHECKING:
    from symvora.core.notifications.center import NotificationCenter
    from symvora.domains.symptoms.flow.screen_flow import ScreenFlow
    from symvora.domains.symptoms.flow.submission import SymptomCheckController

logger = logging.getLogger(__name__)


def register_symptom_tools(
    mcp: FastMCP,
    controller: SymptomCheckController,
    screen_flow: ScreenFlow,
    notifications: NotificationCenter,
) -> None:
    """Register symptom check tools on the MCP server."""

    @mcp.tool
    async def check_symptoms(ctx: Context, symptoms: str) -> str:
        """Describe your symptoms and get general, non-diagnostic advice.

        Every check, successful or not, is saved to your symptom history.

        Args:
            symptoms: Free-text description, e.g. 'headache and fever for 2 days'.
        """
        denied = enter_screen(screen_flow, Screen.SYMPTOMS)
        if denied:
            return denied

        task = controller.submit(symptoms)
        if task is None:
            pending = notifications.peek()
            return json.dumps({
                "status": "rejected",
                "message": pending[-1].message if pending else "",
                "is_loading": controller.state.is_loading,
            })

        # Shielded: a dropped request must not cancel the check or its history entry.
        outcome = await asyncio.shield(task)
        return json.dumps({
            "status": "ok" if outcome.succeeded else "error",
            "result": outcome.result_text,
            "entry": outcome.entry.to_dict(),
            "disclaimer": DISCLAIMER,
        }, indent=2)

    @mcp.tool
    def symptom_check_status() -> str:
        """Show the symptom screen state: last input, result text and loading flag."""
        denied = enter_screen(screen_flow, Screen.SYMPTOMS)
        if denied:
            return denied
        state = controller.state
        return json.dumps({
            "symptom_text": state.symptom_text,
            "result_text": state.result_text,
            "is_loading": state.is_loading,
            "can_submit": state.can_submit,
        })
