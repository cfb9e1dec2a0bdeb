"""Transient user-visible notifications ("toasts")."""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

logger = logging.getLogger(__name__)

NotificationLevel = Literal["info", "success", "warning", "error"]

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.WARNING,
}


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> dict[str, str]:
        return {"level": self.level, "message": self.message, "created_at": self.created_at}


class NotificationCenter:
    """Bounded queue of pending notifications; oldest are dropped first."""

    def __init__(self, max_pending: int = 50) -> None:
        self._pending: deque[Notification] = deque(maxlen=max_pending)
        self._lock = threading.Lock()

    def push(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        with self._lock:
            self._pending.append(notification)
        logger.log(_LOG_LEVELS[level], "Notification [%s]: %s", level, message)
        return notification

    def info(self, message: str) -> Notification:
        return self.push("info", message)

    def success(self, message: str) -> Notification:
        return self.push("success", message)

    def warning(self, message: str) -> Notification:
        return self.push("warning", message)

    def error(self, message: str) -> Notification:
        return self.push("error", message)

    def peek(self) -> list[Notification]:
        with self._lock:
            return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return all pending notifications and forget them."""
        with self._lock:
            drained = list(self._pending)
            self._pending.clear()
        return drained
