"""Screen flow — tracks the current screen and keeps it behind the gate.

The gate is applied on every navigation request and again whenever the
session changes, so a user sitting on a protected screen is moved to sign-up
as soon as the session ends, without asking to navigate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from symvora.core.history.store import HistoryStore
from symvora.core.navigation.gate import INITIAL_SCREEN, Screen, resolve_screen
from symvora.core.session.models import User
from symvora.core.session.state import SessionState

logger = logging.getLogger(__name__)

ScreenListener = Callable[[Screen], None]


class ScreenFlow:
    """Owns the current ``Screen`` for one session."""

    def __init__(
        self,
        session: SessionState,
        history: HistoryStore | None = None,
        *,
        seed_sample_history: bool = True,
    ) -> None:
        self._session = session
        self._history = history
        self._seed_sample_history = seed_sample_history
        self._current = INITIAL_SCREEN
        self._listeners: list[ScreenListener] = []
        self._unsubscribe = session.subscribe(self._on_session_changed)

    @property
    def current(self) -> Screen:
        return self._current

    def navigate(self, requested: Screen) -> Screen:
        """Request a screen; returns the screen actually shown."""
        actual = resolve_screen(self._session.is_authenticated(), requested)
        if actual is not requested:
            logger.info("Navigation to %s redirected to %s", requested.value, actual.value)
        self._set_current(actual)
        return actual

    def subscribe(self, listener: ScreenListener) -> Callable[[], None]:
        """Register ``listener`` for screen changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Detach from the session."""
        self._unsubscribe()

    def _on_session_changed(self, user: User | None) -> None:
        self._set_current(resolve_screen(user is not None, self._current))

    def _set_current(self, screen: Screen) -> None:
        previous = self._current
        self._current = screen
        if screen is Screen.HISTORY:
            self._on_enter_history()
        if screen is not previous:
            logger.info("Screen %s -> %s", previous.value, screen.value)
            for listener in list(self._listeners):
                listener(screen)

    def _on_enter_history(self) -> None:
        # First visit seeds the examples; a cleared store stays empty.
        if self._history is None or not self._seed_sample_history:
            return
        if len(self._history) == 0 and not self._history.has_been_initialized():
            self._history.initialize_with_sample_data()
