from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from .config import ReorderConfig

_logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> Any: ...


class Scheduler(Protocol):
    """Host timer source; ``asyncio`` event loops implement it as-is."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle: ...


class DebouncedTrigger:
    """Collapses bursts of checkbox toggles into one reorder pass.

    Idle -> Pending on a toggle; a toggle while Pending restarts the timer; the
    timer firing runs ``on_fire`` once and returns to Idle. Toggles are ignored
    while auto-reorder is disabled.
    """

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        on_fire: Callable[[], Any],
        settings: Callable[[], ReorderConfig],
    ) -> None:
        self._scheduler = scheduler
        self._on_fire = on_fire
        self._settings = settings
        self._handle: TimerHandle | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def notify_toggled(self) -> None:
        if self._closed:
            return
        cfg = self._settings()
        if not cfg.enable_auto_reorder:
            return
        # Cancel before scheduling: at most one pending pass.
        self._cancel_pending()
        self._handle = self._scheduler.call_later(cfg.reorder_delay_s, self._fire)
        _logger.debug(f"Reorder scheduled in {cfg.reorder_delay_ms} ms")

    def cancel(self) -> None:
        """Teardown: drop the pending timer and ignore later toggles."""
        self._cancel_pending()
        self._closed = True

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        if self._closed:
            return
        self._on_fire()
