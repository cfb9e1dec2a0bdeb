"""Account service — abstraction over the user account backend."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from symvora.core.session.models import User


class AccountError(Exception):
    """An account operation was rejected; the message is user-facing."""


class NotAuthenticatedError(AccountError):
    """A profile operation was attempted with nobody signed in."""


@runtime_checkable
class AccountService(Protocol):
    """Abstract interface for creating, authenticating and updating accounts.

    Flows call these methods without knowing whether accounts live in memory
    or in a hosted identity backend. Failures raise ``AccountError``.
    """

    async def sign_up(self, name: str, email: str, password: str) -> User:
        """Create an account and sign it in."""
        ...

    async def login(self, email: str, password: str) -> User:
        """Authenticate and sign in."""
        ...

    async def load_current_user(self) -> User | None:
        """Return the still-signed-in user from a previous run, if any."""
        ...

    async def update_profile_name(self, name: str) -> None:
        """Change the signed-in user's display name."""
        ...

    async def update_password(self, current_password: str, new_password: str) -> None:
        """Re-verify ``current_password`` and replace it."""
        ...

    def logout(self) -> None:
        """Sign out locally."""
        ...


__all__ = ["AccountError", "AccountService", "NotAuthenticatedError"]
