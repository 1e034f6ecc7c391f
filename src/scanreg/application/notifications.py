"""Single-slot notification channel.

At most one message is shown at a time; posting replaces whatever is
currently displayed, and a message disappears on its own once its time to
live has passed.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

DEFAULT_TTL_SECONDS = 5.0


class Severity(Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity
    expires_at: float


class NotificationChannel:

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        listener: Callable[[Notification], None] | None = None,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._current: Notification | None = None
        self.listener = listener

    def post(self, message: str, severity: Severity = Severity.INFO) -> Notification:
        self._current = Notification(
            message=message,
            severity=severity,
            expires_at=self._clock() + self._ttl,
        )
        if self.listener is not None:
            self.listener(self._current)
        return self._current

    def current(self) -> Notification | None:
        """The displayed notification, or None if nothing is shown."""
        if self._current is not None and self._clock() >= self._current.expires_at:
            self._current = None
        return self._current

    def dismiss(self) -> None:
        self._current = None

    # Shorthands used by the intake workflow.

    def info(self, message: str) -> Notification:
        return self.post(message, Severity.INFO)

    def success(self, message: str) -> Notification:
        return self.post(message, Severity.SUCCESS)

    def warning(self, message: str) -> Notification:
        return self.post(message, Severity.WARNING)

    def error(self, message: str) -> Notification:
        return self.post(message, Severity.ERROR)
