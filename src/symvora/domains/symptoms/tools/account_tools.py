"""MCP tools for sign-up, login and profile management."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import Context, FastMCP

from symvora.core.navigation.gate import Screen
from symvora.domains.symptoms.tools.gating import enter_screen

if TYPE_CHECKING:
    from symvora.core.notifications.center import NotificationCenter
    from symvora.core.session.state import SessionState
    from symvora.domains.symptoms.flow.accounts import AccountFlow
    from symvora.domains.symptoms.flow.screen_flow import ScreenFlow


def register_account_tools(
    mcp: FastMCP,
    account_flow: AccountFlow,
    screen_flow: ScreenFlow,
    session: SessionState,
    notifications: NotificationCenter,
) -> None:
    """Register account tools on the MCP server."""

    def _result(ok: bool, **extra) -> str:
        pending = notifications.peek()
        return json.dumps({
            "status": "ok" if ok else "error",
            "message": pending[-1].message if pending else "",
            "current_screen": screen_flow.current.value,
            **extra,
        })

    def _already_signed_in() -> str:
        return json.dumps({
            "status": "error",
            "message": "Already signed in. Log out first.",
            "current_screen": screen_flow.current.value,
        })

    @mcp.tool
    async def sign_up(
        ctx: Context,
        name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> str:
        """Create an account and sign in.

        Args:
            name: Full name.
            email: Email address used to log in.
            password: At least 6 characters.
            confirm_password: Must match ``password``.
        """
        if session.is_authenticated():
            return _already_signed_in()
        screen_flow.navigate(Screen.SIGN_UP)
        user = await account_flow.sign_up(name, email, password, confirm_password)
        return _result(user is not None, user=user.to_dict() if user else None)

    @mcp.tool
    async def login(ctx: Context, email: str, password: str) -> str:
        """Log in with email and password.

        Args:
            email: Account email address.
            password: Account password.
        """
        if session.is_authenticated():
            return _already_signed_in()
        screen_flow.navigate(Screen.LOGIN)
        user = await account_flow.login(email, password)
        return _result(user is not None, user=user.to_dict() if user else None)

    @mcp.tool
    def logout() -> str:
        """Sign out and return to the welcome screen."""
        account_flow.logout()
        screen_flow.navigate(Screen.WELCOME)
        return _result(True)

    @mcp.tool
    async def update_name(ctx: Context, name: str) -> str:
        """Change your display name (Settings).

        Args:
            name: New full name; must not be blank.
        """
        denied = enter_screen(screen_flow, Screen.SETTINGS)
        if denied:
            return denied
        ok = await account_flow.update_name(name)
        return _result(ok)

    @mcp.tool
    async def update_password(
        ctx: Context,
        current_password: str,
        new_password: str,
        confirm_new_password: str,
    ) -> str:
        """Change your password (Settings).

        Args:
            current_password: Your existing password, re-verified first.
            new_password: At least 6 characters.
            confirm_new_password: Must match ``new_password``.
        """
        denied = enter_screen(screen_flow, Screen.SETTINGS)
        if denied:
            return denied
        ok = await account_flow.update_password(
            current_password, new_password, confirm_new_password
        )
        return _result(ok)
