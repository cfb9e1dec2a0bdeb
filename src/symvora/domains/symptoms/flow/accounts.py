"""Account flow — sign-up, login, logout and profile changes.

Each action validates first, then calls the account collaborator, and only
on success touches the session. Validation failures and collaborator errors
end at this boundary as notifications; nothing is retried.
"""

from __future__ import annotations

import logging

from symvora.core.accounts import AccountError, AccountService
from symvora.core.notifications.center import NotificationCenter
from symvora.core.session.models import User
from symvora.core.session.state import SessionState
from symvora.core.validation.forms import (
    ValidationError,
    validate_login,
    validate_name,
    validate_password_change,
    validate_sign_up,
)

logger = logging.getLogger(__name__)


class AccountFlow:
    """Bridges account forms to the account service and the session."""

    def __init__(
        self,
        accounts: AccountService,
        session: SessionState,
        notifications: NotificationCenter,
    ) -> None:
        self._accounts = accounts
        self._session = session
        self._notifications = notifications

    async def sign_up(
        self, name: str, email: str, password: str, confirm_password: str
    ) -> User | None:
        try:
            name, email, password = validate_sign_up(name, email, password, confirm_password)
        except ValidationError as exc:
            self._notifications.warning(str(exc))
            return None

        try:
            user = await self._accounts.sign_up(name, email, password)
        except AccountError as exc:
            self._notifications.error(str(exc) or "Signup failed")
            return None

        self._session.set_user(user)
        self._notifications.success("Account created!")
        return user

    async def login(self, email: str, password: str) -> User | None:
        try:
            email, password = validate_login(email, password)
        except ValidationError as exc:
            self._notifications.warning(str(exc))
            return None

        try:
            user = await self._accounts.login(email, password)
        except AccountError as exc:
            self._notifications.error(str(exc) or "Login failed")
            return None

        self._session.set_user(user)
        self._notifications.success("Logged in!")
        return user

    async def restore_session(self) -> User | None:
        """Pick up a user still signed in with the account backend."""
        try:
            user = await self._accounts.load_current_user()
        except AccountError as exc:
            logger.warning("Could not restore previous session: %s", exc)
            return None
        if user is not None:
            self._session.set_user(user)
            logger.info("Previous session restored")
        return user

    def logout(self) -> None:
        self._accounts.logout()
        self._session.set_user(None)
        self._notifications.info("Logged out")

    async def update_name(self, name: str) -> bool:
        try:
            name = validate_name(name)
        except ValidationError as exc:
            self._notifications.warning(str(exc))
            return False

        if not self._session.is_authenticated():
            self._notifications.warning("Not authenticated")
            return False

        try:
            await self._accounts.update_profile_name(name)
        except AccountError as exc:
            self._notifications.error(str(exc) or "Failed to update name")
            return False

        self._session.update_name(name)
        self._notifications.success("Name updated")
        return True

    async def update_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> bool:
        if not self._session.is_authenticated():
            self._notifications.warning("Not authenticated")
            return False

        try:
            current_password, new_password = validate_password_change(
                current_password, new_password, confirm_password
            )
        except ValidationError as exc:
            self._notifications.warning(str(exc))
            return False

        try:
            await self._accounts.update_password(current_password, new_password)
        except AccountError as exc:
            self._notifications.error(str(exc) or "Failed to update password")
            return False

        self._notifications.success("Password updated")
        return True
