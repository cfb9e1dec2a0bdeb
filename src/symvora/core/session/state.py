"""Session state — the single authoritative holder of the current user."""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable

from symvora.core.session.models import User

logger = logging.getLogger(__name__)

SessionListener = Callable[[User | None], None]


class SessionState:
    """Holds at most one authenticated ``User``.

    The user reference is swapped under a lock, so readers see either the old
    or the new record. Listeners are called after every change, outside the
    lock, with the new user (or None).
    """

    def __init__(self) -> None:
        self._user: User | None = None
        self._lock = threading.Lock()
        self._listeners: list[SessionListener] = []

    @property
    def current_user(self) -> User | None:
        with self._lock:
            return self._user

    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def set_user(self, user: User | None) -> None:
        """Replace the current user (None signs out)."""
        with self._lock:
            previous = self._user
            self._user = user
        if (previous is None) != (user is None):
            logger.info("Session %s", "started" if user is not None else "ended")
        self._notify(user)

    def update_name(self, new_name: str) -> None:
        """Rename the current user; does nothing when nobody is signed in."""
        with self._lock:
            if self._user is None:
                return
            self._user = dataclasses.replace(self._user, name=new_name)
            user = self._user
        self._notify(user)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` for session changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, user: User | None) -> None:
        for listener in list(self._listeners):
            listener(user)
