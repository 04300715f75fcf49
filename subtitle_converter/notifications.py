"""Auto-dismissing notifications with at most one pending timer.

WHY: "Content copied" toasts disappear after a few seconds. If the user
clicks Copy twice, the first timer must not hide the second message early,
so each new notification supersedes the previous one.

HOW: Notifier schedules the dismiss callback through any object with the
tkinter ``after(ms, func)`` / ``after_cancel(id)`` pair (the Tk root in the
app, a fake clock in tests). Before scheduling it cancels the pending
timer, so only one is ever outstanding.

RULES:
- At most one dismiss timer is pending at any time
- A newer notification cancels and replaces the older timer
- on_show / on_hide run on the scheduler's thread (the Tk main loop)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from subtitle_converter.config import NOTIFICATION_DELAY_MS

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """The subset of tkinter.Misc used for timers."""

    def after(self, ms: int, func: Callable[[], Any]) -> Any:
        ...

    def after_cancel(self, id: Any) -> None:
        ...


class Notifier:
    """Shows a message, then hides it after a fixed delay."""

    def __init__(
        self,
        scheduler: Scheduler,
        on_show: Callable[[str], None],
        on_hide: Callable[[], None],
        delay_ms: int = NOTIFICATION_DELAY_MS,
    ) -> None:
        self._scheduler = scheduler
        self._on_show = on_show
        self._on_hide = on_hide
        self._delay_ms = delay_ms
        self._pending: Optional[Any] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def notify(self, message: str) -> None:
        """Show message and (re)start the dismiss timer."""
        self.cancel()
        logger.debug("Notification: %s", message)
        self._on_show(message)
        self._pending = self._scheduler.after(self._delay_ms, self._dismiss)

    def cancel(self) -> None:
        """Cancel the pending dismiss timer, if any, without hiding."""
        if self._pending is not None:
            self._scheduler.after_cancel(self._pending)
            self._pending = None

    def _dismiss(self) -> None:
        self._pending = None
        self._on_hide()
