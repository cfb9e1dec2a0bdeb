"""In-process account backend.

Accounts live only as long as the process. Used for local runs and tests in
place of a hosted identity service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from symvora.core.accounts import AccountError, NotAuthenticatedError
from symvora.core.accounts.passwords import PasswordHash, hash_password, verify_password
from symvora.core.session.models import User

logger = logging.getLogger(__name__)


@dataclass
class _AccountRecord:
    email: str
    name: str
    password: PasswordHash


class InMemoryAccountService:
    """Dict-backed ``AccountService`` keyed by lower-cased email.

    Usage::

        accounts = InMemoryAccountService()
        user = await accounts.sign_up("Ada", "ada@example.com", "secret1")
        accounts.logout()
        user = await accounts.login("ada@example.com", "secret1")
    """

    def __init__(self) -> None:
        self._accounts: dict[str, _AccountRecord] = {}
        self._current_key: str | None = None

    @staticmethod
    def _key(email: str) -> str:
        return email.strip().lower()

    def _require_current(self) -> _AccountRecord:
        if self._current_key is None:
            raise NotAuthenticatedError("Not authenticated")
        return self._accounts[self._current_key]

    async def sign_up(self, name: str, email: str, password: str) -> User:
        key = self._key(email)
        if key in self._accounts:
            raise AccountError("An account with this email already exists")
        record = _AccountRecord(
            email=email.strip(),
            name=name.strip(),
            password=hash_password(password),
        )
        self._accounts[key] = record
        self._current_key = key
        logger.info("Account created (%d accounts)", len(self._accounts))
        return User(email=record.email, name=record.name)

    async def login(self, email: str, password: str) -> User:
        record = self._accounts.get(self._key(email))
        if record is None or not verify_password(password, record.password):
            logger.info("Login rejected")
            raise AccountError("Invalid email or password")
        self._current_key = self._key(email)
        return User(email=record.email, name=record.name or record.email.split("@")[0])

    async def load_current_user(self) -> User | None:
        if self._current_key is None:
            return None
        record = self._accounts[self._current_key]
        return User(email=record.email, name=record.name)

    async def update_profile_name(self, name: str) -> None:
        record = self._require_current()
        record.name = name.strip()

    async def update_password(self, current_password: str, new_password: str) -> None:
        record = self._require_current()
        if not verify_password(current_password, record.password):
            raise AccountError("Current password is incorrect")
        record.password = hash_password(new_password)
        logger.info("Password updated")

    def logout(self) -> None:
        self._current_key = None
